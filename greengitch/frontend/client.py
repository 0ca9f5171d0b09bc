"""HTTP client the Streamlit page uses to talk to the GreenGitch API."""

from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..schemas import GenerateRequest, GenerateResponse, ImageResult
from ..utils import decode_data_uri, is_data_uri

logger = logging.getLogger(__name__)


class GenerationFailed(RuntimeError):
    """Raised when the API did not return a usable set of images."""


class GreenGitchApiClient:
    """Thin synchronous wrapper around the ``/api`` routes. No retries."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def generate(self, city: str, issue: str) -> List[ImageResult]:
        payload = GenerateRequest(city=city, issue=issue).model_dump()
        try:
            with self._client() as client:
                response = client.post("/api/generate", json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Generation request failed: %s", exc)
            raise GenerationFailed("Could not reach the GreenGitch API") from exc

        if not response.is_success:
            logger.error("Generation request returned %s: %s", response.status_code, response.text)
            raise GenerationFailed(self._error_message(response))

        try:
            return GenerateResponse.model_validate_json(response.content).images
        except ValidationError as exc:
            raise GenerationFailed("The GreenGitch API returned an unexpected response") from exc

    def fetch_image_bytes(self, url: str) -> bytes:
        """Return the raw bytes behind an image URL (embedded data URI or server path)."""
        if is_data_uri(url):
            _, data = decode_data_uri(url)
            return data

        with self._client() as client:
            response = client.get(url)
        response.raise_for_status()
        return response.content

    # --- Internals ------------------------------------------------------------

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self._base_url, timeout=self._timeout, transport=self._transport)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"HTTP {response.status_code}"
