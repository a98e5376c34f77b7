"""Tests for :mod:`backend.service`."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from backend.aiservices.imagegenerationclient import ImageGenerationClient, ProviderError
from backend.aiservices.openaiimagegenerationclient import OpenAIImageGenerationClient
from backend.config import Settings
from backend.samples import DEMO_IMAGE_URLS, DEMO_MODE_MESSAGE, pick_demo_image
from backend.service import ImageGenerationService, PromptValidationError


class RecordingClient(ImageGenerationClient):
    def __init__(self, result: str = "https://cdn.example.com/a.png", exc: Exception | None = None) -> None:
        self.result = result
        self.exc = exc
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.exc is not None:
            raise self.exc
        return self.result


def _settings(**overrides) -> Settings:
    values = {"openai_api_key": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.parametrize("prompt", [None, "", " ", "\n\t  "])
def test_blank_prompts_never_reach_the_provider(prompt) -> None:
    client = RecordingClient()
    service = ImageGenerationService(_settings(openai_api_key="sk-test"), image_client=client)

    with pytest.raises(PromptValidationError) as excinfo:
        service.generate(prompt)

    assert excinfo.value.message == "Prompt is required"
    assert client.prompts == []


def test_blank_prompt_is_rejected_in_demo_mode_too() -> None:
    service = ImageGenerationService(_settings())

    with pytest.raises(PromptValidationError):
        service.generate("   ")


@pytest.mark.parametrize("key", [None, "", "   ", "your_openai_api_key_here"])
def test_missing_or_placeholder_key_selects_demo_mode(key) -> None:
    service = ImageGenerationService(_settings(openai_api_key=key))

    assert service.demo_mode is True


def test_demo_mode_returns_member_of_demo_set() -> None:
    service = ImageGenerationService(_settings())

    for prompt in ("a red fox", "an astronaut riding a horse", "x"):
        result = service.generate(prompt)
        assert result.success is True
        assert result.image_url in DEMO_IMAGE_URLS
        assert result.message == DEMO_MODE_MESSAGE
        assert result.error is None


def test_demo_mode_covers_whole_demo_set() -> None:
    service = ImageGenerationService(_settings(), rng=random.Random(7))

    seen = {service.generate("a red fox").image_url for _ in range(200)}

    assert seen == set(DEMO_IMAGE_URLS)


def test_configured_key_builds_openai_client() -> None:
    service = ImageGenerationService(_settings(openai_api_key="sk-test"))

    assert service.demo_mode is False
    assert isinstance(service._image_client, OpenAIImageGenerationClient)


def test_live_mode_forwards_prompt_unchanged() -> None:
    client = RecordingClient()
    service = ImageGenerationService(_settings(openai_api_key="sk-test"), image_client=client)

    result = service.generate("  a red fox  ")

    assert client.prompts == ["  a red fox  "]
    assert result.success is True
    assert result.image_url == "https://cdn.example.com/a.png"
    assert result.message is None


def test_live_mode_does_not_retry_or_fall_back() -> None:
    client = RecordingClient(exc=ProviderError("boom"))
    service = ImageGenerationService(_settings(openai_api_key="sk-test"), image_client=client)

    with pytest.raises(ProviderError, match="boom"):
        service.generate("a red fox")

    assert len(client.prompts) == 1


def test_unexpected_client_errors_become_provider_errors() -> None:
    client = RecordingClient(exc=TimeoutError("read timed out"))
    service = ImageGenerationService(_settings(openai_api_key="sk-test"), image_client=client)

    with pytest.raises(ProviderError, match="read timed out") as excinfo:
        service.generate("a red fox")

    assert isinstance(excinfo.value.__cause__, TimeoutError)


def test_pick_demo_image_rejects_empty_set() -> None:
    with pytest.raises(ValueError):
        pick_demo_image(())


def test_result_payload_omits_absent_fields() -> None:
    service = ImageGenerationService(_settings(openai_api_key="sk-test"), image_client=RecordingClient())

    payload = service.generate("a red fox").to_payload()

    assert payload == {"success": True, "imageUrl": "https://cdn.example.com/a.png"}
