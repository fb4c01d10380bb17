"""Sprite generation driver."""

from dino_sprites.core.generator import GenerationResult, SpriteGenerator

__all__ = ["GenerationResult", "SpriteGenerator"]
