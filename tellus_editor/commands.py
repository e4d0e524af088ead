"""Parsing of ':' commands, selections and small coordinate helpers."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from tellus_editor.level import LayerKind

_U16_MAX = 0xFFFF
_WHITESPACE = re.compile(r"\s")
_UNSIGNED = re.compile(r"\+?[0-9]+")

_NEW_USAGE = "usage: :new <width> <height> [path]"
_MAP_USAGE = "usage: :map <ground|detail|logic> <folder>"
_FILL_USAGE = "usage: :fill <0-9>"


class CommandError(ValueError):
    """Raised when a command or its arguments are invalid."""


@dataclass(frozen=True)
class SelectionRect:
    """An inclusive rectangle of tiles."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the tile (x, y) lies inside the rectangle."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )

    def area(self) -> int:
        """Number of tiles covered."""
        return self.width * self.height


def selection_rect(start: tuple[int, int], end: tuple[int, int]) -> SelectionRect:
    """Build the rectangle spanned by two corner tiles, both included."""
    min_x, max_x = sorted((start[0], end[0]))
    min_y, max_y = sorted((start[1], end[1]))
    return SelectionRect(min_x, min_y, max_x - min_x + 1, max_y - min_y + 1)


def expand_user_path(raw: str) -> Path:
    """Expand a leading '~' or '~/' using the HOME environment variable."""
    home = os.environ.get("HOME")
    if raw == "~":
        return Path(home) if home is not None else Path(raw)
    if raw.startswith("~/") and home is not None:
        return Path(home) / raw[2:]
    return Path(raw)


def command_arg(text: str) -> str | None:
    """Return everything after the command word, trimmed, or None if empty."""
    match = _WHITESPACE.search(text)
    if match is None:
        return None
    rest = text[match.end():].strip()
    return rest or None


def parse_layer(text: str) -> LayerKind:
    """Parse a layer name."""
    try:
        return LayerKind(text)
    except ValueError:
        raise CommandError(f"invalid layer: {text}") from None


def parse_u16(text: str, name: str) -> int:
    """Parse an unsigned 16-bit integer."""
    if _UNSIGNED.fullmatch(text, re.ASCII if False else 0) is None or not text.isascii():
        raise CommandError(f"invalid {name}: {text}")
    value = int(text)
    if value > _U16_MAX:
        raise CommandError(f"invalid {name}: {text}")
    return value


def validate_tile_id(digit: int, action: str) -> None:
    """Only tile ids 0 to 9 may be painted or filled."""
    if not 0 <= digit <= 9:
        raise CommandError(f"{action} only supports tile IDs 0-9")


def parse_fill_command(text: str) -> int:
    """Parse ':fill <digit>' and return the digit."""
    value = command_arg(text)
    if value is None:
        raise CommandError(_FILL_USAGE)
    digit = parse_u16(value, "tile id")
    validate_tile_id(digit, "fill")
    return digit


def parse_new_command(text: str) -> tuple[int, int, Path | None]:
    """Parse ':new <width> <height> [path]'; the path may contain spaces."""
    parts = text.split()
    if not parts or parts[0] != "new" or len(parts) < 2:
        raise CommandError(_NEW_USAGE)
    width = parse_u16(parts[1], "width")
    if len(parts) < 3:
        raise CommandError(_NEW_USAGE)
    height = parse_u16(parts[2], "height")
    rest = parts[3:]
    path = expand_user_path(" ".join(rest)) if rest else None
    return width, height, path


def parse_map_command(text: str) -> tuple[LayerKind, Path]:
    """Parse ':map <layer> <folder>'; the folder may contain spaces."""
    rest = command_arg(text)
    if rest is None:
        raise CommandError(_MAP_USAGE)
    match = _WHITESPACE.search(rest)
    if match is None:
        raise CommandError(_MAP_USAGE)
    layer_text = rest[:match.start()]
    folder = rest[match.end():].strip()
    if not folder:
        raise CommandError(_MAP_USAGE)
    return parse_layer(layer_text), expand_user_path(folder)


def clamp_step(value: int, delta: int, max_value: int) -> int:
    """Move value by delta, saturating at 0 and 65535, then cap at max_value."""
    return min(max(0, min(value + delta, _U16_MAX)), max_value)