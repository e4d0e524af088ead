"""Editor configuration read from a simple key=value file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from tellus_editor.commands import expand_user_path
from tellus_editor.level import LayerKind, layer_index

Color = tuple[int, int, int]

_U16_MAX = 0xFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")
_HEX_BYTE = re.compile(r"\+?[0-9a-fA-F]+")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is malformed."""


@dataclass
class UiTheme:
    """Colours used by the interface, as RGB triples."""

    sidebar_bg: Color = (22, 24, 28)
    panel_border: Color = (96, 102, 112)
    panel_text: Color = (214, 217, 224)
    muted_text: Color = (142, 149, 160)
    accent_text: Color = (156, 196, 255)
    success_text: Color = (150, 204, 167)
    warning_text: Color = (230, 201, 123)
    error_text: Color = (232, 111, 111)
    grid_bg: Color = (220, 220, 220)
    tile_bg: Color = (0, 0, 0)
    cursor_normal: Color = (61, 110, 173)
    cursor_insert: Color = (72, 140, 87)
    cursor_command: Color = (166, 132, 58)


@dataclass
class AppConfig:
    """Layout settings, theme and per-layer texture folders."""

    sidebar_width: int = 38
    tile_gap_x: int = 1
    tile_gap_y: int = 1
    theme: UiTheme = field(default_factory=UiTheme)
    layer_mappings: list[Path | None] = field(default_factory=lambda: [None, None, None])


_INT_KEYS = ("sidebar_width", "tile_gap_x", "tile_gap_y")
_IMAGE_KEYS = {
    "ground_images": LayerKind.GROUND,
    "detail_images": LayerKind.DETAIL,
    "logic_images": LayerKind.LOGIC,
}
_COLOR_KEYS = (
    "sidebar_bg",
    "panel_border",
    "panel_text",
    "muted_text",
    "accent_text",
    "success_text",
    "warning_text",
    "error_text",
    "grid_bg",
    "tile_bg",
    "cursor_normal",
    "cursor_insert",
    "cursor_command",
)


def default_config_path() -> Path:
    """Path of the per-user configuration file."""
    return expand_user_path("~/.tellus-42.conf")


def load_from_default_location() -> AppConfig | None:
    """Load the per-user configuration, or return None if there is none."""
    path = default_config_path()
    if not path.exists():
        return None
    return load_from_file(path)


def load_from_file(path: str | Path) -> AppConfig:
    """Read and parse a configuration file."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigError(f"failed to read {path}: {err}") from err

    config = AppConfig()
    for line_number, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith(("#", ";")):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ConfigError(f"invalid config line {line_number}: expected key=value")
        _apply_entry(config, key.strip(), value.strip(), line_number)
    return config


def _apply_entry(config: AppConfig, key: str, value: str, line_number: int) -> None:
    if key in _INT_KEYS:
        setattr(config, key, _parse_u16(value, key, line_number))
    elif key in _IMAGE_KEYS:
        config.layer_mappings[layer_index(_IMAGE_KEYS[key])] = expand_user_path(value)
    elif key in _COLOR_KEYS:
        setattr(config.theme, key, parse_color(value, key, line_number))
    else:
        raise ConfigError(f"unknown config key on line {line_number}: {key}")


def _parse_u16(value: str, key: str, line_number: int) -> int:
    if _UNSIGNED.fullmatch(value) is None or int(value) > _U16_MAX:
        raise ConfigError(f"invalid integer for {key} on line {line_number}: {value}")
    return int(value)


def parse_color(value: str, key: str, line_number: int) -> Color:
    """Parse a '#RRGGBB' (or 'RRGGBB') colour."""
    text = value.strip()
    text = text.removeprefix("#")
    if len(text.encode("utf-8")) != 6:
        raise ConfigError(
            f"invalid color for {key} on line {line_number}: expected #RRGGBB"
        )
    channels = []
    for start in (0, 2, 4):
        pair = text[start:start + 2]
        if _HEX_BYTE.fullmatch(pair) is None:
            raise ConfigError(f"invalid color for {key} on line {line_number}: {value}")
        channels.append(int(pair, 16))
    red, green, blue = channels
    return (red, green, blue)