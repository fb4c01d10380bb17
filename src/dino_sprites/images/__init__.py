"""Image generation clients."""

from dino_sprites.images.client import (
    GeminiImageClient,
    MockImageClient,
    extract_image,
    get_image_client,
    response_text,
)

__all__ = [
    "GeminiImageClient",
    "MockImageClient",
    "extract_image",
    "get_image_client",
    "response_text",
]
