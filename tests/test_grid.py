import pytest

from pathgrid.errors import InvalidConfiguration
from pathgrid.grid import GridModel
from pathgrid.types import Role

from gridutil import grid_from


def test_empty_grid_defaults():
    grid = GridModel.empty()
    assert (grid.rows, grid.cols) == (25, 40)
    assert grid.start == (2, 2)
    assert grid.end == (22, 37)
    assert grid.role(grid.start) is Role.START
    assert grid.role(grid.end) is Role.END
    assert grid.wall_count() == 0


def test_tiny_grid_uses_corners():
    grid = GridModel.empty(1, 3)
    assert grid.start == (0, 0)
    assert grid.end == (0, 2)


@pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3), (1, 1)])
def test_bad_dimensions_rejected(rows, cols):
    with pytest.raises(InvalidConfiguration):
        GridModel.empty(rows, cols)


def test_neighbors_order_and_walls():
    grid = grid_from(
        "S#.",
        "...",
        "..E",
    )
    # up is a wall; remaining order is down, left, right
    assert grid.neighbors((1, 1)) == [(2, 1), (1, 0), (1, 2)]
    assert grid.neighbors((0, 0)) == [(1, 0)]
    assert grid.neighbors((2, 2)) == [(1, 2), (2, 1)]


def test_wall_edits_never_touch_endpoints():
    grid = GridModel.empty(5, 5)
    assert grid.set_wall(grid.start) is False
    assert grid.toggle_wall(grid.end) is False
    assert grid.role(grid.start) is Role.START
    assert grid.role(grid.end) is Role.END

    assert grid.toggle_wall((0, 4)) is True
    assert grid.is_wall((0, 4))
    assert grid.toggle_wall((0, 4)) is True
    assert not grid.is_wall((0, 4))


def test_move_start_and_end():
    grid = GridModel.empty(7, 7)
    grid.set_wall((0, 0))
    old = grid.start

    assert grid.move_start((0, 0)) is True
    assert grid.role((0, 0)) is Role.START
    assert grid.role(old) is Role.EMPTY

    assert grid.move_start(grid.end) is False
    assert grid.move_end(grid.start) is False
    assert grid.move_end((6, 0)) is True
    assert grid.end == (6, 0)


def test_validate_rejects_bad_endpoints():
    grid = grid_from(
        "S.#",
        "...",
        "..E",
    )
    assert grid.validate() == ((0, 0), (2, 2))
    with pytest.raises(InvalidConfiguration):
        grid.validate(start=(0, 2))
    with pytest.raises(InvalidConfiguration):
        grid.validate(start=(2, 2))
    with pytest.raises(InvalidConfiguration):
        grid.validate(end=(5, 5))


def test_stamp_endpoints_rejects_same_cell():
    grid = GridModel.filled(3, 3)
    with pytest.raises(InvalidConfiguration):
        grid.stamp_endpoints((1, 1), (1, 1))


def test_save_and_load(tmp_path):
    grid = grid_from(
        "S.#.",
        "..#.",
        "...E",
    )
    path = tmp_path / "grids" / "g.txt"
    grid.save(str(path))
    assert path.read_text().splitlines()[0] == "GRID 3 4 0 0 2 3"

    loaded = GridModel.load(str(path))
    assert loaded.roles == grid.roles
    assert (loaded.start, loaded.end) == (grid.start, grid.end)


@pytest.mark.parametrize("text", [
    "",
    "GRID 2 2 0 0 1 1\n00\n",
    "GRID 2 2 0 0 1 1\n0x\n00\n",
    "MAZE 2 2 0 0 1 1\n00\n00\n",
])
def test_load_rejects_malformed_files(tmp_path, text):
    path = tmp_path / "bad.txt"
    path.write_text(text)
    with pytest.raises(InvalidConfiguration):
        GridModel.load(str(path))


def test_to_text_and_copy():
    grid = grid_from("S#E")
    assert grid.to_text() == "S#E"
    clone = grid.copy()
    clone.set_wall((0, 1), False)
    assert grid.is_wall((0, 1))


def test_small_grids_fall_back_to_corners():
    grid = GridModel.empty(5, 5)
    assert (grid.start, grid.end) == ((0, 0), (4, 4))
