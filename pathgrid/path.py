# pathgrid/path.py
from __future__ import annotations
from typing import TYPE_CHECKING, List

from .types import Coord, Tag

if TYPE_CHECKING:
    from .search import RunState


def reconstruct(run: "RunState", end: Coord) -> List[Coord]:
    """
    Follow parent links from `end` back to the start and return the chain
    start -> end. Every cell on it except the endpoints is tagged PATH.
    """
    s = end
    path = [s]
    while s in run.parent:
        s = run.parent[s]
        path.append(s)
    path.reverse()

    for s in path:
        run.tag(s, Tag.PATH)
    return path
