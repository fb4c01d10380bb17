"""Gemini image generation client for game sprites."""

import base64
import logging
from dataclasses import dataclass
from io import BytesIO
from types import SimpleNamespace
from typing import Any

from PIL import Image

from dino_sprites.config import Settings

logger = logging.getLogger(__name__)

RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


@dataclass
class ImageUsage:
    """Track image generation usage and costs."""

    images_generated: int = 0
    cost_per_image: float = 0.039  # Gemini Flash image pricing

    @property
    def total_cost(self) -> float:
        return self.images_generated * self.cost_per_image

    def record_generation(self):
        self.images_generated += 1


def _iter_parts(response: Any):
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            yield part


def extract_image(response: Any) -> bytes | None:
    """Return the first inline image payload in a response, decoded.

    Scans every candidate and every part. The payload may arrive as a
    base64 string or as already-decoded bytes.

    Returns:
        Raw image bytes, or None if no part carries inline data
    """
    for part in _iter_parts(response):
        inline_data = getattr(part, "inline_data", None)
        if inline_data and inline_data.data:
            data = inline_data.data
            if isinstance(data, str):
                return base64.b64decode(data)
            return bytes(data)
    return None


def response_text(response: Any) -> str:
    """Concatenate the text parts of a response."""
    texts = [part.text for part in _iter_parts(response) if getattr(part, "text", None)]
    return "".join(texts)


class GeminiImageClient:
    """Client for generating images using Google Gemini."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._client = None
        self._types = None
        self.usage = ImageUsage()

    def _get_client(self):
        """Lazily initialize the Gemini client."""
        if self._client is None:
            from google import genai
            from google.genai import types

            self._client = genai.Client(api_key=self.settings.require_api_key())
            self._types = types
            logger.debug("Initialized Gemini client for model %s", self.settings.image_model)
        return self._client

    def generate_content(self, prompt: str) -> Any:
        """Request a mixed text/image response for a prompt.

        Args:
            prompt: Text description of the image to generate

        Returns:
            The provider's GenerateContentResponse
        """
        client = self._get_client()
        types = self._types

        response = client.models.generate_content(
            model=self.settings.image_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_modalities=RESPONSE_MODALITIES,
            ),
        )

        if extract_image(response) is not None:
            self.usage.record_generation()
        return response


class MockImageClient:
    """Mock image client for running the pipeline without API calls."""

    def __init__(self, width: int = 32, height: int = 32):
        self.width = width
        self.height = height
        self.usage = ImageUsage(cost_per_image=0.0)  # Free for mock

    def generate_content(self, prompt: str) -> Any:
        """Return a response-shaped object holding a placeholder PNG."""
        self.usage.record_generation()
        image_part = SimpleNamespace(
            text=None,
            inline_data=SimpleNamespace(mime_type="image/png", data=self._create_placeholder()),
        )
        text_part = SimpleNamespace(text="Placeholder sprite", inline_data=None)
        content = SimpleNamespace(parts=[text_part, image_part])
        return SimpleNamespace(candidates=[SimpleNamespace(content=content)])

    def _create_placeholder(self) -> bytes:
        """Create a magenta-backed square with a green block in the middle."""
        img = Image.new("RGBA", (self.width, self.height), (255, 0, 255, 255))
        pixels = img.load()

        for x in range(self.width // 4, 3 * self.width // 4):
            for y in range(self.height // 4, 3 * self.height // 4):
                pixels[x, y] = (76, 175, 80, 255)

        buffer = BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()


def get_image_client(
    settings: Settings | None = None,
    mock: bool = False,
) -> GeminiImageClient | MockImageClient:
    """Get the Gemini client, or the offline mock when requested."""
    if mock:
        return MockImageClient()
    return GeminiImageClient(settings or Settings())
