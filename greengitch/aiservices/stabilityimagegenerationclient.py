"""Text-to-image client for the Stability AI REST API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import Settings, get_settings
from .imagegenerationclient import (
    ImageGenerationClient,
    ImageGenerationConfigError,
    ImageGenerationError,
)

logger = logging.getLogger(__name__)

# Fixed generation parameters sent with every request.
CFG_SCALE = 7
IMAGE_SIZE = 1024
STEPS = 30
SAMPLES = 1
PROMPT_WEIGHT = 1


class StabilityImageGenerationClient(ImageGenerationClient):
    """
    Calls ``/v1/generation/{engine}/text-to-image`` once per prompt.

    The API key is read from settings when the client is built but only
    validated when ``generate`` is called, so the application starts without it.
    A custom ``transport`` can be passed for tests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._api_key = self.settings.stability_api_key.get_secret_value().strip()
        self._url = (
            f"{self.settings.stability_api_host.rstrip('/')}"
            f"/v1/generation/{self.settings.stability_engine_id}/text-to-image"
        )
        self._timeout = self.settings.stability_timeout_seconds
        self._transport = transport

    # --- Capability flags -----------------------------------------------------

    @property
    def provider_name(self) -> str:
        return "Stability AI"

    # --- Generation -----------------------------------------------------------

    def generate(self, prompt: str) -> str:
        if not self._api_key:
            raise ImageGenerationConfigError("STABILITY_API_KEY is not configured")

        payload = {
            "text_prompts": [
                {"text": prompt, "weight": PROMPT_WEIGHT},
            ],
            "cfg_scale": CFG_SCALE,
            "height": IMAGE_SIZE,
            "width": IMAGE_SIZE,
            "steps": STEPS,
            "samples": SAMPLES,
        }
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(self._url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise ImageGenerationError(f"Stability AI request failed: {exc}") from exc

        if not response.is_success:
            raise ImageGenerationError(f"Stability AI API error: {self._error_message(response)}")

        return self._extract_image(response)

    # --- Internals ------------------------------------------------------------

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason_phrase or f"HTTP {response.status_code}"

    @staticmethod
    def _extract_image(response: httpx.Response) -> str:
        try:
            body: Any = response.json()
        except ValueError as exc:
            raise ImageGenerationError("Stability AI returned a non-JSON response") from exc

        artifacts = body.get("artifacts") if isinstance(body, dict) else None
        if not isinstance(artifacts, list) or not artifacts:
            raise ImageGenerationError("Stability AI response contained no artifacts")

        image_b64 = artifacts[0].get("base64") if isinstance(artifacts[0], dict) else None
        if not isinstance(image_b64, str) or not image_b64:
            raise ImageGenerationError("Stability AI artifact is missing its base64 payload")

        logger.debug("Received %s artifact(s) from Stability AI", len(artifacts))
        return image_b64
