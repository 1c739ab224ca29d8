# pathgrid/heuristics.py
from .types import Coord


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def zero(a: Coord, b: Coord) -> int:
    return 0
