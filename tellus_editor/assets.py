"""Tile textures loaded from image folders and sampled into cell colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

RgbColor = tuple[int, int, int]
# None stands for "no colour": a transparent pixel or an unmapped tile.
CellColor = RgbColor | None

_SUPPORTED_EXTENSIONS = {"png", "jpg", "jpeg", "bmp", "gif", "webp"}
_MAX_TILES = 9
_U16_MAX = 0xFFFF


class AssetError(OSError):
    """Raised when a texture folder cannot be used."""


@dataclass(eq=False)
class TileTexture:
    """A decoded image bound to a tile id."""

    id: int
    name: str
    image: Image.Image = field(repr=False)


@dataclass
class LayerAssets:
    """The folder a layer is mapped to and the textures taken from it."""

    folder: Path | None = None
    tiles: list[TileTexture] = field(default_factory=list)


def is_supported_image(path: str | Path) -> bool:
    """Whether the file extension names a supported image format."""
    return Path(path).suffix[1:] in _SUPPORTED_EXTENSIONS


def _open_image(path: Path) -> Image.Image:
    with Image.open(path) as img:
        img.load()
        return img.copy()


def load_layer_folder(folder: str | Path) -> tuple[LayerAssets, int]:
    """Load up to nine textures from a folder, sorted by path.

    Returns the assets and the number of unreadable files skipped.
    """
    folder = Path(folder)
    try:
        files = sorted(
            entry for entry in folder.iterdir() if is_supported_image(entry)
        )
    except OSError as err:
        raise AssetError(f"failed to read {folder}: {err}") from err

    tiles: list[TileTexture] = []
    skipped = 0
    for path in files:
        try:
            image = _open_image(path)
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError):
            skipped += 1
            continue
        tiles.append(TileTexture(len(tiles) + 1, path.name, image))
        if len(tiles) == _MAX_TILES:
            break

    if not tiles:
        raise AssetError(f"no readable images found in {folder}")
    return LayerAssets(folder=folder, tiles=tiles), skipped


def sample_texture(texture: TileTexture, width: int, height: int) -> list[CellColor]:
    """Resize with nearest-neighbour sampling and return pixels row by row."""
    size = (max(width, 1), max(height, 1))
    resized = texture.image.convert("RGBA").resize(size, Image.Resampling.NEAREST)
    raw = resized.tobytes()
    return [
        None if raw[i + 3] == 0 else (raw[i], raw[i + 1], raw[i + 2])
        for i in range(0, len(raw), 4)
    ]


def texture_colors(
    texture: TileTexture | None, width: int, cell_rows: int
) -> list[list[tuple[CellColor, CellColor]]]:
    """Colours for half-block cells: one (top, bottom) pair per character."""
    if texture is None:
        return [[(None, None)] * width for _ in range(cell_rows)]

    row_len = max(width, 1)
    pixels = sample_texture(texture, width, min(cell_rows * 2, _U16_MAX))
    rows = [pixels[i:i + row_len] for i in range(0, len(pixels), row_len)]

    result = []
    for index in range(0, len(rows), 2):
        top = rows[index]
        bottom = rows[index + 1] if index + 1 < len(rows) else top
        result.append(list(zip(top, bottom)))
    return result