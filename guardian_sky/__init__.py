"""Headless game logic for a 3D rail shooter: affine maths, transforms, lights, texture handles, scenes and entities."""

__version__ = "0.1.0"

__all__ = [
    "affine",
    "transform",
    "lights",
    "textures",
    "scenes",
    "bullets",
    "enemy",
    "rail_camera",
    "skydome",
    "player",
]