import base64
import binascii
import re
from textwrap import dedent
from typing import Tuple

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<b64>;base64)?,(?P<data>.*)$", re.DOTALL)

MIN_PLACEHOLDER_SIZE = 1
MAX_PLACEHOLDER_SIZE = 4096
DEFAULT_PLACEHOLDER_SIZE = 1024


def to_data_uri(image_b64: str, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{image_b64}"


def is_data_uri(url: str) -> bool:
    return url.startswith("data:")


def decode_data_uri(url: str) -> Tuple[str, bytes]:
    """
    Split a ``data:`` URI into its mime type and raw bytes.

    Args:
        url (str): The data URI, base64 or percent-free plain text.

    Returns:
        tuple: ``(mime_type, payload)``. The mime type defaults to ``text/plain``.

    Raises:
        ValueError: If ``url`` is not a data URI or the base64 payload is corrupt.
    """
    match = DATA_URI_PATTERN.match(url)
    if not match:
        raise ValueError("not a data URI")

    mime_type = match.group("mime") or "text/plain"
    data = match.group("data")
    if not match.group("b64"):
        return mime_type, data.encode("utf-8")

    try:
        return mime_type, base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid base64 payload: {exc}") from exc


def clamp_dimension(value: int) -> int:
    return max(MIN_PLACEHOLDER_SIZE, min(MAX_PLACEHOLDER_SIZE, value))


def render_placeholder_svg(width: int = DEFAULT_PLACEHOLDER_SIZE, height: int = DEFAULT_PLACEHOLDER_SIZE) -> str:
    """Neutral grey SVG used for image slots that have no real generation behind them."""
    width = clamp_dimension(width)
    height = clamp_dimension(height)
    font_size = max(8, min(width, height) // 16)
    return dedent(
        f"""\
        <svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
          <rect width="100%" height="100%" fill="#e5e7eb"/>
          <text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle"
                font-family="Arial, Helvetica, sans-serif" font-size="{font_size}" fill="#6b7280">{width} x {height}</text>
        </svg>
        """
    )
