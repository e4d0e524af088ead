"""Levels, command parsing, configuration, textures and layout helpers for a tile-level editor."""

__version__ = "0.1.0"