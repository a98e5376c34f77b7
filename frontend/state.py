"""Client-side generation flow, kept free of Streamlit so it can be tested directly."""

from __future__ import annotations

import html
import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import requests

from .config import ClientSettings, get_client_settings
from .samples import FALLBACK_IMAGE_URLS

logger = logging.getLogger(__name__)

PROMPT_MISSING = "Please enter a prompt"
GENERATION_FAILED = "Failed to generate image. Please try again."


class GenerationFailed(RuntimeError):
    """The gateway answered, but not with a usable image."""


@dataclass
class GeneratorState:
    prompt: str = ""
    generated_image: str = ""
    loading: bool = False
    error: str = ""


@dataclass(frozen=True)
class DownloadLink:
    url: str
    filename: str

    def to_html(self, label: str = "Download") -> str:
        return '<a href="{}" download="{}" target="_blank">{}</a>'.format(
            html.escape(self.url, quote=True),
            html.escape(self.filename, quote=True),
            html.escape(label),
        )


def download_filename(timestamp_ms: Optional[int] = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"realpix-generated-{timestamp_ms}.jpg"


class ImageGeneratorController:
    """Drives the Idle -> Requesting -> Idle cycle for one generator view.

    A failed request never leaves the view empty: the error text is set and
    a sample image from the client's own fallback list is shown instead.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        session: Any = None,
        fallback_images: Sequence[str] = FALLBACK_IMAGE_URLS,
        rng: Optional[random.Random] = None,
        state: Optional[GeneratorState] = None,
    ) -> None:
        self.settings = settings or get_client_settings()
        self._session = session if session is not None else requests.Session()
        self._fallback_images = tuple(fallback_images)
        self._rng = rng or random.Random()
        self.state = state or GeneratorState()

    @property
    def endpoint(self) -> str:
        return f"{self.settings.api_url.rstrip('/')}/generate-image"

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def on_generate_clicked(self) -> GeneratorState:
        if self.begin():
            self.complete()
        return self.state

    def begin(self) -> bool:
        """Validate the prompt and enter the loading state.

        Returns False when the click is ignored, either because a request is
        already in flight or because the prompt is blank.
        """
        if self.state.loading:
            return False
        if not self.state.prompt.strip():
            self.state.error = PROMPT_MISSING
            return False

        self.state.loading = True
        self.state.error = ""
        return True

    def complete(self) -> GeneratorState:
        """Send the pending request and settle back into Idle."""
        try:
            self.state.generated_image = self._request_image(self.state.prompt)
            self.state.error = ""
        except (requests.RequestException, ValueError, GenerationFailed) as exc:
            logger.warning("Error generating image: %s", exc)
            self.state.error = GENERATION_FAILED
            self.state.generated_image = self._rng.choice(self._fallback_images)
        finally:
            self.state.loading = False
        return self.state

    def _request_image(self, prompt: str) -> str:
        response = self._session.post(
            self.endpoint,
            json={"prompt": prompt},
            timeout=self.settings.request_timeout,
        )
        response.raise_for_status()

        body = response.json()
        if not isinstance(body, dict):
            raise GenerationFailed("Unexpected response body")
        if body.get("success") and body.get("imageUrl"):
            if body.get("message"):
                logger.info("Gateway: %s", body["message"])
            return body["imageUrl"]
        raise GenerationFailed(body.get("message") or body.get("error") or "Failed to generate image")

    # ------------------------------------------------------------------
    # Download
    # ------------------------------------------------------------------
    def download_link(self, timestamp_ms: Optional[int] = None) -> Optional[DownloadLink]:
        if not self.state.generated_image:
            return None
        return DownloadLink(url=self.state.generated_image, filename=download_filename(timestamp_ms))
