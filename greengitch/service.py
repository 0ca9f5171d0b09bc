"""Domain logic for turning a city/issue selection into awareness images."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from fastapi import HTTPException, status

from .config import Settings, get_settings
from .prompts import get_awareness_prompt
from .utils import to_data_uri
from .aiservices.imagegenerationclient import (
    ImageGenerationClient,
    ImageGenerationConfigError,
    ImageGenerationError,
)
from .aiservices.stabilityimagegenerationclient import StabilityImageGenerationClient
from .schemas import ImageResult

logger = logging.getLogger(__name__)

GENERATION_FAILED_DETAIL = "Failed to generate images"

# Only the first slot is backed by a real provider. The remaining slots are
# static stub entries and are flagged as such in every response.
ALTERNATIVE_PROVIDER_LABELS = ("Alternative 1", "Alternative 2")


class GreenGitchService:
    """High-level orchestrator for the image generation provider."""

    def __init__(
        self,
        settings: Settings | None = None,
        image_client: Optional[ImageGenerationClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._image_client = image_client or StabilityImageGenerationClient(self.settings)

    @property
    def provider_name(self) -> str:
        return self._image_client.provider_name

    # ------------------------------------------------------------------
    # Awareness images
    # ------------------------------------------------------------------
    def generate_awareness_images(self, city: str, issue: str) -> List[ImageResult]:
        """Generate one image for ``issue`` in ``city`` and pad the result to three entries."""
        prompt = get_awareness_prompt(city, issue)

        try:
            image_b64 = self._image_client.generate(prompt)
        except ImageGenerationConfigError as exc:
            logger.error("Image provider is not configured: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=GENERATION_FAILED_DETAIL,
            ) from exc
        except ImageGenerationError as exc:
            logger.exception("Image generation failed for %s / %s", city, issue)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=GENERATION_FAILED_DETAIL,
            ) from exc

        images = [
            ImageResult(
                url=to_data_uri(image_b64),
                provider=self._image_client.provider_name,
            )
        ]
        images.extend(self._placeholder_images())
        return images

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _placeholder_images(self) -> List[ImageResult]:
        return [
            ImageResult(url=self.settings.placeholder_url, provider=label, placeholder=True)
            for label in ALTERNATIVE_PROVIDER_LABELS
        ]


@lru_cache
def get_greengitch_service() -> GreenGitchService:
    return GreenGitchService(get_settings())
