"""Tests for :mod:`greengitch.service` and the prompt it sends."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from fastapi import HTTPException

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from greengitch.aiservices.imagegenerationclient import (
    ImageGenerationClient,
    ImageGenerationConfigError,
    ImageGenerationError,
)
from greengitch.config import Settings
from greengitch.prompts import get_awareness_prompt
from greengitch.service import GreenGitchService


class _RecordingClient(ImageGenerationClient):
    def __init__(self, result: str = "cG5n", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[str] = []

    @property
    def provider_name(self) -> str:
        return "Stability AI"

    def generate(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result


def _service(client: ImageGenerationClient, **overrides) -> GreenGitchService:
    settings = Settings(_env_file=None, STABILITY_API_KEY="sk-test", **overrides)
    return GreenGitchService(settings, image_client=client)


def test_prompt_embeds_city_and_issue() -> None:
    assert get_awareness_prompt("Tokyo", "Heat Stress") == (
        "Create a powerful and emotional climate change awareness image depicting the impact of "
        "Heat Stress in Tokyo. Show realistic consequences and environmental effects, focusing on "
        "human impact and urgency for action. Style: photorealistic, dramatic lighting, emotional impact"
    )


def test_generate_awareness_images_calls_provider_once() -> None:
    client = _RecordingClient()
    images = _service(client).generate_awareness_images("Mumbai", "Monsoon Flooding")

    assert client.calls == [get_awareness_prompt("Mumbai", "Monsoon Flooding")]
    assert len(images) == 3
    assert images[0].url == "data:image/png;base64,cG5n"
    assert images[0].provider == "Stability AI"
    assert images[0].placeholder is False


def test_placeholder_entries_are_flagged_and_configurable() -> None:
    images = _service(_RecordingClient(), placeholder_url="/static/blank.svg").generate_awareness_images(
        "London", "Heat Waves"
    )

    assert [(image.provider, image.url, image.placeholder) for image in images[1:]] == [
        ("Alternative 1", "/static/blank.svg", True),
        ("Alternative 2", "/static/blank.svg", True),
    ]


def test_missing_credential_becomes_generic_server_error(caplog) -> None:
    client = _RecordingClient(error=ImageGenerationConfigError("STABILITY_API_KEY is not configured"))

    with caplog.at_level(logging.ERROR, logger="greengitch.service"):
        with pytest.raises(HTTPException) as exc_info:
            _service(client).generate_awareness_images("London", "Flooding")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to generate images"
    assert "STABILITY_API_KEY is not configured" in caplog.text


def test_provider_failure_becomes_generic_server_error(caplog) -> None:
    client = _RecordingClient(error=ImageGenerationError("Stability AI API error: out of credits"))

    with caplog.at_level(logging.ERROR, logger="greengitch.service"):
        with pytest.raises(HTTPException) as exc_info:
            _service(client).generate_awareness_images("London", "Flooding")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to generate images"
    assert "out of credits" in caplog.text
    assert "out of credits" not in exc_info.value.detail
