from __future__ import annotations

from abc import ABC, abstractmethod


class ImageGenerationError(RuntimeError):
    """Raised when a provider could not produce an image."""


class ImageGenerationConfigError(ImageGenerationError):
    """Raised when a provider is missing required configuration (e.g. its API key)."""


class ImageGenerationClient(ABC):
    """Abstract interface for an image generation client.

    Implementations must provide synchronous generation methods
    used by the rest of the application.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:  # pragma: no cover - interface
        """Human readable provider label shown next to generated images."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Generate an image from a prompt and return it base64-encoded.

        Should raise ImageGenerationError (or a subclass) on any failure.
        """
