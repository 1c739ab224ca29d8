import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from pathgrid.grid import GridModel
from pathgrid.pygame_viewer import Viewer
from pathgrid.types import Algorithm, Role, Status


@pytest.fixture
def viewer():
    pygame.init()
    try:
        yield Viewer(GridModel.empty(6, 8), cell_size=10)
    finally:
        pygame.quit()


def test_single_step_then_run_to_end(viewer):
    viewer.single_step()
    assert viewer.running and viewer.paused
    assert viewer.snap.step == 1

    while viewer.running:
        viewer._advance()
    assert viewer.snap.status is Status.FOUND
    assert viewer.snap.path_cells > 0
    viewer.draw()


def test_edits_are_ignored_while_running(viewer):
    viewer.start_or_pause()
    assert viewer.running
    viewer.edit_at((5, 5))
    assert viewer.world.wall_count() == 0

    viewer.reset_run()
    viewer.edit_at((5, 5))  # cell (0, 0)
    assert viewer.world.role((0, 0)) is Role.WALL


def test_move_endpoints_with_mouse(viewer):
    viewer.draw_mode = "end"
    viewer.edit_at((75, 55))  # cell (5, 7)
    assert viewer.world.end == (5, 7)


def test_maze_and_random_walls_replace_world(viewer):
    viewer.algorithm = Algorithm.DFS
    viewer.new_maze()
    assert viewer.world.start == (1, 1)
    viewer.random_walls()
    assert viewer.world.role(viewer.world.start) is Role.START
    viewer.clear()
    assert viewer.world.wall_count() == 0
