import pytest

from tellus_editor.level import Level, LayerKind, LevelError, layer_index, layer_name


def test_new_level_is_all_zero():
    level = Level(3, 2)
    for layer in LayerKind:
        for y in range(level.height):
            for x in range(level.width):
                assert level.tile(layer, x, y) == 0


def test_dimensions_are_kept():
    level = Level(5, 7)
    assert (level.width, level.height) == (5, 7)


def test_set_tile_round_trip():
    level = Level(4, 4)
    level.set_tile(LayerKind.DETAIL, 2, 3, 9)
    assert level.tile(LayerKind.DETAIL, 2, 3) == 9


def test_layers_are_independent():
    level = Level(4, 4)
    level.set_tile(LayerKind.GROUND, 1, 1, 5)
    assert level.tile(LayerKind.DETAIL, 1, 1) == 0
    assert level.tile(LayerKind.LOGIC, 1, 1) == 0


def test_copy_is_independent():
    level = Level(3, 3)
    level.set_tile(LayerKind.GROUND, 0, 0, 4)
    clone = level.copy()
    assert clone == level
    clone.set_tile(LayerKind.GROUND, 0, 0, 8)
    assert level.tile(LayerKind.GROUND, 0, 0) == 4
    assert clone != level


@pytest.mark.parametrize("x, y", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds_access_raises(x, y):
    level = Level(3, 3)
    with pytest.raises(LevelError):
        level.tile(LayerKind.GROUND, x, y)
    with pytest.raises(LevelError):
        level.set_tile(LayerKind.GROUND, x, y, 1)


def test_negative_tile_value_raises():
    level = Level(2, 2)
    with pytest.raises(LevelError):
        level.set_tile(LayerKind.LOGIC, 0, 0, -1)


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0)])
def test_zero_size_raises(width, height):
    with pytest.raises(LevelError):
        Level(width, height)


def test_layer_names():
    assert [layer_name(layer) for layer in LayerKind] == ["ground", "detail", "logic"]


def test_layer_indices():
    assert [layer_index(layer) for layer in LayerKind] == [0, 1, 2]