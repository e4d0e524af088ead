"""Layered tile grid that the editor works on."""

from __future__ import annotations

from enum import Enum

_MAX_TILE = 0xFFFF
_MAX_SIDE = 0xFFFF


class LayerKind(Enum):
    """The three layers that every level carries."""

    GROUND = "ground"
    DETAIL = "detail"
    LOGIC = "logic"


_LAYER_ORDER = (LayerKind.GROUND, LayerKind.DETAIL, LayerKind.LOGIC)


class LevelError(ValueError):
    """Raised for invalid level dimensions, coordinates or tile values."""


def layer_name(layer: LayerKind) -> str:
    """Return the lower-case name of a layer."""
    return layer.value


def layer_index(layer: LayerKind) -> int:
    """Return the position of a layer in ground, detail, logic order."""
    return _LAYER_ORDER.index(layer)


class Level:
    """A rectangular level with one tile grid per layer, all tiles starting at 0."""

    def __init__(self, width: int, height: int) -> None:
        if not 1 <= width <= _MAX_SIDE or not 1 <= height <= _MAX_SIDE:
            raise LevelError(f"invalid level size {width}x{height}")
        self.width = width
        self.height = height
        self._layers: dict[LayerKind, list[int]] = {
            layer: [0] * (width * height) for layer in _LAYER_ORDER
        }

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise LevelError(
                f"tile ({x}, {y}) is outside the {self.width}x{self.height} level"
            )
        return y * self.width + x

    def tile(self, layer: LayerKind, x: int, y: int) -> int:
        """Return the tile id stored at (x, y) on a layer."""
        return self._layers[layer][self._offset(x, y)]

    def set_tile(self, layer: LayerKind, x: int, y: int, value: int) -> None:
        """Store a tile id at (x, y) on a layer."""
        if not 0 <= value <= _MAX_TILE:
            raise LevelError(f"tile id {value} is out of range")
        self._layers[layer][self._offset(x, y)] = value

    def copy(self) -> Level:
        """Return an independent copy of this level."""
        clone = Level.__new__(Level)
        clone.width = self.width
        clone.height = self.height
        clone._layers = {layer: list(tiles) for layer, tiles in self._layers.items()}
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._layers == other._layers
        )

    def __repr__(self) -> str:
        return f"Level(width={self.width}, height={self.height})"