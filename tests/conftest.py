"""Shared fixtures for sprite generation tests."""

import base64
from io import BytesIO
from types import SimpleNamespace

import pytest
from PIL import Image

from dino_sprites.config import Settings


def make_response(image: bytes | str | None = None, text: str | None = None):
    """Build a response shaped like google-genai's GenerateContentResponse."""
    parts = []
    if text is not None:
        parts.append(SimpleNamespace(text=text, inline_data=None))
    if image is not None:
        parts.append(
            SimpleNamespace(
                text=None,
                inline_data=SimpleNamespace(mime_type="image/png", data=image),
            )
        )
    content = SimpleNamespace(parts=parts)
    return SimpleNamespace(candidates=[SimpleNamespace(content=content)])


class FakeClient:
    """Image client returning canned responses keyed by prompt."""

    def __init__(self, responses: dict[str, object]):
        self.responses = responses
        self.prompts: list[str] = []

    def generate_content(self, prompt: str):
        self.prompts.append(prompt)
        response = self.responses.get(prompt)
        if isinstance(response, Exception):
            raise response
        return response if response is not None else make_response(text="I can't draw that.")


@pytest.fixture
def png_bytes() -> bytes:
    img = Image.new("RGBA", (16, 16), (255, 0, 255, 255))
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_base64(png_bytes) -> str:
    return base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        assets_dir=tmp_path / "public" / "assets",
        request_delay=0,
    )
