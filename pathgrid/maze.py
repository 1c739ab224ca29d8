# pathgrid/maze.py
"""
Perfect-maze generation by randomized recursive backtracking.

Passages live on the odd-coordinate lattice: starting from (1, 1) the
carver jumps two cells at a time, opening the cell in between, so the
carved cells always form a spanning tree with exactly one path between
any two of them.
"""
from __future__ import annotations
from typing import List, Optional
import logging
import random

from .errors import InvalidConfiguration
from .grid import GridModel
from .types import Coord, Role

logger = logging.getLogger(__name__)

_JUMPS = ((-2, 0), (2, 0), (0, -2), (0, 2))


def last_odd(n: int) -> int:
    """Largest odd index strictly inside a dimension of size n."""
    return n - 2 if (n - 2) % 2 == 1 else n - 3


def generate_maze(rows: int, cols: int,
                  start: Optional[Coord] = None,
                  end: Optional[Coord] = None,
                  seed: Optional[int] = None,
                  rng: Optional[random.Random] = None) -> GridModel:
    if rows < 3 or cols < 3:
        raise InvalidConfiguration(f"maze needs at least 3x3 cells, got {rows}x{cols}")
    rng = rng or random.Random(seed)

    grid = GridModel.filled(rows, cols, Role.WALL)
    roles = grid.roles
    roles[1][1] = Role.EMPTY
    stack: List[Coord] = [(1, 1)]

    while stack:
        r, c = stack[-1]
        jumps = list(_JUMPS)
        rng.shuffle(jumps)
        for dr, dc in jumps:
            nr, nc = r + dr, c + dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and roles[nr][nc] is Role.WALL:
                roles[nr][nc] = Role.EMPTY
                roles[r + dr // 2][c + dc // 2] = Role.EMPTY
                stack.append((nr, nc))
                break
        else:
            stack.pop()  # dead end

    for name, s in (("start", start), ("end", end)):
        if s is not None and grid.in_bounds(s) and roles[s[0]][s[1]] is Role.WALL:
            logger.warning("maze %s %s is not a carved cell; it may be unreachable", name, s)
    if start is None:
        start = (1, 1)
    if end is None:
        end = (last_odd(rows), last_odd(cols))
        if end == start:
            # only (1, 1) was carved; put the end directly below it
            end = (2, 1)
    grid.stamp_endpoints(start, end)
    logger.debug("generated %dx%d maze with %d passage cells", rows, cols, len(carved_cells(grid)))
    return grid


def carved_cells(grid: GridModel) -> List[Coord]:
    """All non-wall cells, endpoints included."""
    return [s for s in grid.cells() if not grid.is_wall(s)]
