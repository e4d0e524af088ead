from pathlib import Path

import pytest

from tellus_editor.config import (
    AppConfig,
    ConfigError,
    UiTheme,
    default_config_path,
    load_from_default_location,
    load_from_file,
    parse_color,
)


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "tellus.conf"
    path.write_text(text, encoding="utf-8")
    return path


def test_parses_basic_config(tmp_path):
    path = write(
        tmp_path,
        "sidebar_width=44\nground_images=~/tiles/ground\naccent_text=#112233\n",
    )
    config = load_from_file(path)
    assert config.sidebar_width == 44
    assert "tiles/ground" in str(config.layer_mappings[0])
    assert config.theme.accent_text == (0x11, 0x22, 0x33)


def test_defaults():
    config = AppConfig()
    assert config.sidebar_width == 38
    assert (config.tile_gap_x, config.tile_gap_y) == (1, 1)
    assert config.layer_mappings == [None, None, None]
    assert UiTheme().cursor_normal == (61, 110, 173)


def test_comments_blank_lines_and_spaces(tmp_path):
    path = write(
        tmp_path,
        "# comment\n; other comment\n\n  tile_gap_x = 3 \r\nlogic_images = /data/logic\n",
    )
    config = load_from_file(path)
    assert config.tile_gap_x == 3
    assert config.tile_gap_y == 1
    assert config.layer_mappings[2] == Path("/data/logic")
    assert config.layer_mappings[0] is None


def test_missing_equals_reports_line(tmp_path):
    path = write(tmp_path, "# first\nsidebar_width 4\n")
    with pytest.raises(ConfigError, match="invalid config line 2: expected key=value"):
        load_from_file(path)


def test_unknown_key(tmp_path):
    path = write(tmp_path, "colour=#000000\n")
    with pytest.raises(ConfigError, match="unknown config key on line 1: colour"):
        load_from_file(path)


@pytest.mark.parametrize("value", ["-1", "abc", "70000", ""])
def test_invalid_integer(tmp_path, value):
    path = write(tmp_path, f"sidebar_width={value}\n")
    with pytest.raises(ConfigError, match="invalid integer for sidebar_width on line 1"):
        load_from_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="failed to read"):
        load_from_file(tmp_path / "absent.conf")


def test_parse_color_without_hash():
    assert parse_color("ff8000", "grid_bg", 1) == (255, 128, 0)


def test_parse_color_wrong_length():
    with pytest.raises(ConfigError, match="expected #RRGGBB"):
        parse_color("#fff", "grid_bg", 3)


def test_parse_color_bad_digits():
    with pytest.raises(ConfigError, match="invalid color for grid_bg on line 5: #zz0000"):
        parse_color("#zz0000", "grid_bg", 5)


def test_default_config_path_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_path() == tmp_path / ".tellus-42.conf"


def test_default_location_absent(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert load_from_default_location() is None


def test_default_location_present(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".tellus-42.conf").write_text("tile_gap_y=0\n", encoding="utf-8")
    config = load_from_default_location()
    assert config.tile_gap_y == 0