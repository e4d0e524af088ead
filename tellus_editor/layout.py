"""Rectangle arithmetic and text helpers used to lay out the canvas."""

from __future__ import annotations

from dataclasses import dataclass

from tellus_editor.level import LayerKind

ROW_NUMBER_GUTTER_WIDTH = 4
COLUMN_NUMBER_GUTTER_HEIGHT = 2

_U16_MAX = 0xFFFF


def _sat_add(a: int, b: int) -> int:
    return min(a + b, _U16_MAX)


def _sat_sub(a: int, b: int) -> int:
    return max(a - b, 0)


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return _sat_add(self.x, self.width)

    @property
    def bottom(self) -> int:
        return _sat_add(self.y, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class CanvasLayout:
    """The tile grid and the number gutters around it."""

    grid: Rect
    row_gutter: Rect
    column_gutter: Rect
    corner: Rect


def clip_rect(area: Rect, bounds: Rect) -> Rect | None:
    """Intersect two rectangles; None if they do not overlap."""
    left = max(area.x, bounds.x)
    top = max(area.y, bounds.y)
    right = min(area.right, bounds.right)
    bottom = min(area.bottom, bounds.bottom)
    if left >= right or top >= bottom:
        return None
    return Rect(left, top, right - left, bottom - top)


def split_canvas(area: Rect) -> CanvasLayout:
    """Reserve a row-number gutter on the right and a column gutter below."""
    gutter_w = min(ROW_NUMBER_GUTTER_WIDTH, area.width)
    left = Rect(area.x, area.y, area.width - gutter_w, area.height)
    row_gutter = Rect(area.x + left.width, area.y, gutter_w, area.height)

    gutter_h = min(COLUMN_NUMBER_GUTTER_HEIGHT, left.height)
    grid = Rect(left.x, left.y, left.width, left.height - gutter_h)
    column_gutter = Rect(left.x, left.y + grid.height, left.width, gutter_h)

    corner = Rect(row_gutter.x, column_gutter.y, row_gutter.width, column_gutter.height)
    return CanvasLayout(grid, row_gutter, column_gutter, corner)


def inset_rect_end(area: Rect, gap_x: int, gap_y: int) -> Rect:
    """Shrink a rectangle from its right and bottom edges."""
    return Rect(area.x, area.y, _sat_sub(area.width, gap_x), _sat_sub(area.height, gap_y))


def inset_rect_uniform(area: Rect, margin: int) -> Rect:
    """Shrink a rectangle by the same margin on every side."""
    double = _sat_add(margin, margin)
    return Rect(
        _sat_add(area.x, margin),
        _sat_add(area.y, margin),
        _sat_sub(area.width, double),
        _sat_sub(area.height, double),
    )


def center_text(text: str, width: int) -> str:
    """Centre text in a field, truncating when it does not fit."""
    if width <= len(text):
        return text[:width]
    padding = width - len(text)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


def pad_right(text: str, width: int) -> str:
    """Left-align text in a field, truncating when it does not fit."""
    if width <= len(text):
        return text[:width]
    return text.ljust(width)


_ORDER = (LayerKind.GROUND, LayerKind.DETAIL, LayerKind.LOGIC)


def next_layer(layer: LayerKind) -> LayerKind:
    return _ORDER[(_ORDER.index(layer) + 1) % len(_ORDER)]


def prev_layer(layer: LayerKind) -> LayerKind:
    return _ORDER[(_ORDER.index(layer) - 1) % len(_ORDER)]