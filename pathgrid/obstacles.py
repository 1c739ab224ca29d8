# pathgrid/obstacles.py
from __future__ import annotations
from typing import Optional
import logging
import random

from .errors import InvalidConfiguration
from .grid import DEFAULT_COLS, DEFAULT_ROWS, GridModel
from .types import Coord, Role

logger = logging.getLogger(__name__)

DEFAULT_DENSITY = 0.30


def sprinkle(grid: GridModel, density: float = DEFAULT_DENSITY,
             seed: Optional[int] = None, rng: Optional[random.Random] = None) -> int:
    """
    Turn each EMPTY cell into a WALL with probability `density`, in place.
    Start and end are never touched. Connectivity is not preserved.
    Returns the number of walls added.
    """
    if not 0.0 <= density <= 1.0:
        raise InvalidConfiguration(f"density must be within [0, 1], got {density}")
    rng = rng or random.Random(seed)

    added = 0
    for row in grid.roles:
        for c, role in enumerate(row):
            if role is Role.EMPTY and rng.random() < density:
                row[c] = Role.WALL
                added += 1
    logger.debug("sprinkled %d walls at density %.2f", added, density)
    return added


def random_grid(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                density: float = DEFAULT_DENSITY,
                start: Optional[Coord] = None, end: Optional[Coord] = None,
                seed: Optional[int] = None) -> GridModel:
    grid = GridModel.empty(rows, cols, start, end)
    sprinkle(grid, density, seed=seed)
    return grid
