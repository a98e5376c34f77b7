"""Domain logic for turning RealPix prompts into image URLs."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from .aiservices.imagegenerationclient import ImageGenerationClient, ProviderError
from .aiservices.openaiimagegenerationclient import OpenAIImageGenerationClient
from .config import Settings, get_settings
from .samples import DEMO_IMAGE_URLS, DEMO_MODE_MESSAGE, pick_demo_image
from .schemas import GenerationResult

logger = logging.getLogger(__name__)

PROMPT_REQUIRED = "Prompt is required"


class PromptValidationError(ValueError):
    """The request carried no usable prompt."""

    def __init__(self, message: str = PROMPT_REQUIRED) -> None:
        super().__init__(message)
        self.message = message


class ImageGenerationService:
    """Decides between demo mode and the live provider for each prompt.

    The service holds no per-request state; one instance serves every
    request for the lifetime of the process.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        image_client: Optional[ImageGenerationClient] = None,
        demo_images: Sequence[str] = DEMO_IMAGE_URLS,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._demo_images = tuple(demo_images)
        self._rng = rng
        if image_client is not None:
            self._image_client = image_client
        elif self.settings.demo_mode:
            self._image_client = None
        else:
            self._image_client = OpenAIImageGenerationClient(self.settings)

    @property
    def demo_mode(self) -> bool:
        return self._image_client is None

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, prompt: Optional[str]) -> GenerationResult:
        """Generate one image for ``prompt``.

        Raises :class:`PromptValidationError` for a missing or blank prompt and
        :class:`ProviderError` when the live provider fails. Neither path
        retries or substitutes a demo image.
        """
        if prompt is None or not prompt.strip():
            raise PromptValidationError()

        if self.demo_mode:
            image_url = pick_demo_image(self._demo_images, self._rng)
            logger.info("Demo mode: serving sample image %s", image_url)
            return GenerationResult.ok(image_url, message=DEMO_MODE_MESSAGE)

        try:
            image_url = self._image_client.generate(prompt)
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(str(exc) or exc.__class__.__name__) from exc

        logger.info("Generated image for prompt of %s chars", len(prompt))
        return GenerationResult.ok(image_url)
