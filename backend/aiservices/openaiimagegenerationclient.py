# clients/openai_imagegenerationclient.py
from __future__ import annotations

import logging
from typing import Any, Optional

from openai import OpenAI, OpenAIError
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from ..config import Settings, get_settings
from .imagegenerationclient import ImageGenerationClient, ProviderError

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


class OpenAIImageGenerationClient(ImageGenerationClient):
    """
    Works with:
      - api.openai.com (DALL-E 3, the default)
      - any OpenAI-compatible images endpoint (set openai_base_url)

    The SDK's built-in retries are disabled: a failed call surfaces
    immediately as a ProviderError.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Any = None) -> None:
        self.settings = settings or get_settings()

        if client is not None:
            self._client = client
        else:
            api_key = self.settings.openai_api_key
            self._client = OpenAI(
                api_key=api_key.get_secret_value() if api_key else None,
                base_url=self.settings.openai_base_url,
                timeout=self.settings.provider_timeout,
                max_retries=0,
            )

        self._model = self.settings.image_model
        self._size = self.settings.image_size

    def generate(self, prompt: str) -> str:
        params = {
            "model": self._model,
            "prompt": prompt,
            "n": 1,
            "size": self._size,
        }

        try:
            resp = self._client.images.generate(**params)
        except OpenAIError as exc:
            raise ProviderError(str(exc) or exc.__class__.__name__) from exc

        return self._extract_url(resp)

    # --- Internals ------------------------------------------------------------

    @staticmethod
    def _extract_url(resp: Any) -> str:
        data = getattr(resp, "data", None)
        if not data:
            raise ProviderError("Provider returned no images")

        url = getattr(data[0], "url", None)
        if not url:
            raise ProviderError("Provider response is missing an image URL")

        try:
            _URL_ADAPTER.validate_python(url)
        except ValidationError as exc:
            raise ProviderError(f"Provider returned an invalid image URL: {url!r}") from exc

        logger.debug("Provider returned image %s", url)
        return url
