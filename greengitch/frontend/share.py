from datetime import datetime
from typing import Optional
from urllib.parse import quote

from ..utils import DATA_URI_PATTERN

SHARE_PLATFORMS = ("twitter", "facebook", "instagram")

# Instagram has no web share intent; the link only opens the home page.
INSTAGRAM_HOME = "https://instagram.com"

_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}


def share_text(city: str, issue: str) -> str:
    return f"Check out this climate change awareness image for {city}'s {issue} issue!"


def share_url(platform: str, city: str, issue: str, page_url: str) -> str:
    encoded_page = quote(page_url, safe="")
    if platform == "twitter":
        text = quote(share_text(city, issue), safe="")
        return f"https://twitter.com/intent/tweet?text={text}&url={encoded_page}"
    if platform == "facebook":
        return f"https://www.facebook.com/sharer/sharer.php?u={encoded_page}"
    if platform == "instagram":
        return INSTAGRAM_HOME
    raise ValueError(f"unsupported share platform '{platform}'")


def download_filename(url: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    millis = int(now.timestamp() * 1000)
    return f"climate-awareness-{millis}.{_extension_for(url)}"


def download_mime_type(url: str) -> str:
    match = DATA_URI_PATTERN.match(url)
    if match and match.group("mime"):
        return match.group("mime")
    if url.split("?", 1)[0].endswith(".svg"):
        return "image/svg+xml"
    return "image/jpeg"


def _extension_for(url: str) -> str:
    return _EXTENSIONS.get(download_mime_type(url), "jpg")
