# tellus_editor

This package provides the building blocks for a keyboard-driven editor of
tile-based game levels. A level has three layers: `ground`, `detail` and `logic`.
The package contains:

- an in-memory level grid
- a parser for `:` commands
- a configuration file reader
- texture loading from image folders
- rectangle and text helpers for laying out a terminal canvas

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `tellus_editor.level`

- `LayerKind`: an enum with the members `GROUND`, `DETAIL` and `LOGIC`. Their values are `"ground"`, `"detail"` and `"logic"`.
- `layer_name(layer)` returns the name of a layer.
- `layer_index(layer)` returns the position of a layer in the order ground, detail, logic.
- `Level(width, height)`:
  - Both sides must be between 1 and 65535. Any other size raises `LevelError`, which is a `ValueError`.
  - Every tile starts at 0.
  - `tile(layer, x, y)` reads a tile and `set_tile(layer, x, y, value)` writes one. Both raise `LevelError` when the coordinates fall outside the level. `set_tile` also raises it when the value is outside 0–65535.
  - `copy()` returns an independent copy.
  - Two levels compare equal when their sizes and contents match.

```python
from tellus_editor.level import Level, LayerKind

level = Level(4, 3)
level.set_tile(LayerKind.DETAIL, 1, 2, 7)
assert level.tile(LayerKind.DETAIL, 1, 2) == 7
```

### `tellus_editor.commands`

These functions parse the text of editor commands. Each one raises `CommandError`, which is a `ValueError`, when the input is invalid.

- `parse_new_command("new 10 12 ~/My Levels/a.tlvl")` returns `(10, 12, Path(...))`. The path is optional and may contain spaces.
- `parse_map_command("map ground ~/Pictures/My Tiles")` returns `(LayerKind.GROUND, Path(...))`.
- `parse_fill_command("fill 9")` returns `9`. Only the ids 0–9 are accepted.
- `command_arg(text)` returns the text that follows the command word.
- `parse_layer(text)` parses a layer name.
- `parse_u16(text, name)` parses an integer from 0 to 65535.
- `validate_tile_id(digit, action)` raises `CommandError` for any id outside 0–9.
- `expand_user_path(raw)` expands `~` and `~/...` from `HOME`.
- `selection_rect(start, end)` builds the inclusive `SelectionRect` that two corners span. The rectangle has the methods `contains(x, y)` and `area()`.
- `clamp_step(value, delta, max_value)` moves a coordinate by `delta`. The result stays between 0 and `max_value`.

### `tellus_editor.config`

`load_from_file(path)` reads a file of `key=value` lines and returns an `AppConfig`:

- Blank lines are skipped.
- Lines that start with `#` or `;` are comments.
- A malformed line, an unknown key or a bad value raises `ConfigError`. The message gives the line number.

`load_from_default_location()` reads `~/.tellus-42.conf`. If that file does not exist, it returns `None`. `default_config_path()` gives the file's path.

```
sidebar_width=44
tile_gap_x=1
tile_gap_y=1
ground_images=~/tiles/ground
detail_images=~/tiles/detail
logic_images=~/tiles/logic
accent_text=#9cc4ff
```

The integer keys take values from 0 to 65535.

Colour keys take `#RRGGBB` or `RRGGBB`. The value is parsed by `parse_color` into an RGB triple on `AppConfig.theme`, which is a `UiTheme`. The colour keys are:

- `sidebar_bg`
- `panel_border`
- `panel_text`
- `muted_text`
- `accent_text`
- `success_text`
- `warning_text`
- `error_text`
- `grid_bg`
- `tile_bg`
- `cursor_normal`
- `cursor_insert`
- `cursor_command`

The `*_images` keys fill `AppConfig.layer_mappings`, which has one entry each for ground, detail and logic.

### `tellus_editor.assets`

`load_layer_folder(folder)` loads a folder of textures and returns `(LayerAssets, skipped)`. The files are handled as follows:

- Only files with the extensions `png`, `jpg`, `jpeg`, `bmp`, `gif` and `webp` are considered. `is_supported_image(path)` makes this check.
- The files are sorted by path.
- Files that cannot be decoded are skipped and counted in `skipped`.
- Up to nine images are kept. They become `TileTexture`s with the ids 1–9.

If the folder cannot be read, or holds no readable image, the function raises `AssetError`.

`sample_texture(texture, width, height)` resizes the image with nearest-neighbour sampling and returns the pixels row by row. Each pixel is an RGB triple, or `None` where the pixel is fully transparent.

`texture_colors(texture, width, cell_rows)` pairs the sampled rows into `(top, bottom)` colours, one pair per character cell, for drawing with half-blocks. When `texture` is `None`, every pair is `(None, None)`.

### `tellus_editor.layout`

- `Rect`: a rectangle of terminal cells. `CanvasLayout` holds the grid, the two gutters and the corner between them.
- `clip_rect(area, bounds)` returns the intersection of two rectangles, or `None` when they do not overlap.
- `split_canvas(area)` sets aside a row-number gutter of `ROW_NUMBER_GUTTER_WIDTH` (4) columns on the right. It also sets aside a column-number gutter of `COLUMN_NUMBER_GUTTER_HEIGHT` (2) rows below the grid.
- `inset_rect_end(area, gap_x, gap_y)` shrinks a rectangle from its right and bottom edges.
- `inset_rect_uniform(area, margin)` shrinks a rectangle by the same margin on every side.
- `center_text(text, width)` centres text in a field of `width` characters. `pad_right(text, width)` left-aligns it. Both truncate text that does not fit.
- `next_layer(layer)` and `prev_layer(layer)` cycle through ground, detail and logic.

## What this package does not do

This package has no interactive editor. It has:

- no command to install
- no terminal screen, drawing or key handling
- no modes, cursor, undo history or yank buffer

Commands are parsed but not carried out.

Levels exist only in memory. There is no code to read or write level files.