from __future__ import annotations

from abc import ABC, abstractmethod


class ProviderError(RuntimeError):
    """Raised when the external image provider fails or answers with garbage."""


class ImageGenerationClient(ABC):
    """Abstract interface for an image generation client.

    Implementations must provide a synchronous generation method
    used by the rest of the application. They return the URL of exactly
    one generated image and raise :class:`ProviderError` on any failure.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Generate one image from a prompt and return its absolute URL."""
