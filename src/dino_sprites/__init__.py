"""Pixel-art sprite generator for the dinosaur platformer."""

__version__ = "0.1.0"
