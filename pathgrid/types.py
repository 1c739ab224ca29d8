# pathgrid/types.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)


class Role(Enum):
    """Structural role of a cell, set by the grid editor."""
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"


class Tag(Enum):
    """Exploration annotation, only meaningful during a run."""
    UNVISITED = "unvisited"
    FRONTIER = "frontier"
    VISITED = "visited"
    PATH = "path"


class Status(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"

    @property
    def terminal(self) -> bool:
        return self in (Status.FOUND, Status.EXHAUSTED)


class Algorithm(str, Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def weighted(self) -> bool:
        return self in (Algorithm.ASTAR, Algorithm.DIJKSTRA)

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.ASTAR: "A*",
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
}
