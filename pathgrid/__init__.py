# pathgrid/__init__.py
from .types import Algorithm, Coord, Role, Status, Tag
from .errors import InvalidConfiguration, NoActiveRun, PathgridError
from .grid import GridModel
from .heuristics import manhattan
from .frontier import FifoFrontier, Frontier, LifoFrontier, PriorityFrontier, make_frontier
from .snapshot import Snapshot
from .search import RunState, SearchStepper
from .path import reconstruct
from .maze import carved_cells, generate_maze
from .obstacles import random_grid, sprinkle
from .runner import RunStats, run_all, run_search

__all__ = [
    "Algorithm", "Coord", "Role", "Status", "Tag",
    "InvalidConfiguration", "NoActiveRun", "PathgridError",
    "GridModel", "manhattan",
    "Frontier", "PriorityFrontier", "FifoFrontier", "LifoFrontier", "make_frontier",
    "Snapshot", "RunState", "SearchStepper", "reconstruct",
    "generate_maze", "carved_cells", "sprinkle", "random_grid",
    "RunStats", "run_search", "run_all",
]
