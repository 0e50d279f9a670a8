import pytest

from tty_sokoban import Grid, Tile


def test_new_grid_is_empty_floor():
    grid = Grid(3, 2)
    assert (grid.width, grid.height) == (3, 2)
    assert grid.shape == (2, 3)
    assert grid.count(Tile.EMPTY) == 6


def test_get_and_set_use_x_y_order():
    grid = Grid.from_rows(["#.", "$@"])
    assert grid[1, 0] == Tile.GOAL
    assert grid[0, 1] == Tile.BOX
    grid[1, 0] = Tile.BOX_ON_GOAL
    assert grid.rows() == ["#*", "$@"]


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_out_of_bounds_access_raises(pos):
    grid = Grid(2, 2)
    assert not grid.in_bounds(*pos)
    with pytest.raises(IndexError):
        grid[pos]
    with pytest.raises(IndexError):
        grid[pos] = Tile.WALL


def test_cells_hold_one_character():
    grid = Grid(1, 1)
    with pytest.raises(ValueError):
        grid[0, 0] = "ab"


def test_find_is_row_major():
    grid = Grid.from_rows(["$ $", " $ "])
    assert grid.find(Tile.BOX) == [(0, 0), (2, 0), (1, 1)]


def test_copy_is_independent():
    grid = Grid.from_rows(["@ "])
    clone = grid.copy()
    assert clone == grid
    clone[1, 0] = Tile.WALL
    assert clone != grid
    assert grid[1, 0] == Tile.EMPTY


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_tile_helpers():
    assert {t for t in Tile if t.is_box} == {Tile.BOX, Tile.BOX_ON_GOAL}
    assert {t for t in Tile if t.is_player} == {Tile.PLAYER, Tile.PLAYER_ON_GOAL}
    assert {t for t in Tile if t.is_goal} == {Tile.GOAL, Tile.BOX_ON_GOAL, Tile.PLAYER_ON_GOAL}
    assert Tile.from_char("$") is Tile.BOX
    assert Tile.from_char("?") == "?"
