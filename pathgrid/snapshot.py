# pathgrid/snapshot.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .grid import GridModel
from .types import Coord, Role, Status, Tag

_ROLE_GLYPH = {Role.WALL: "#", Role.START: "S", Role.END: "E"}
_TAG_GLYPH = {Tag.UNVISITED: ".", Tag.FRONTIER: "+", Tag.VISITED: "o", Tag.PATH: "*"}


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of the grid with the exploration tags of one step applied."""
    status: Status
    step: int
    rows: int
    cols: int
    roles: Tuple[Tuple[Role, ...], ...]
    tags: Tuple[Tuple[Tag, ...], ...]
    current: Optional[Coord] = None

    @staticmethod
    def capture(grid: GridModel, tags: List[List[Tag]], status: Status,
                step: int, current: Optional[Coord] = None) -> "Snapshot":
        return Snapshot(
            status=status,
            step=step,
            rows=grid.rows,
            cols=grid.cols,
            roles=tuple(tuple(row) for row in grid.roles),
            tags=tuple(tuple(row) for row in tags),
            current=current,
        )

    def role(self, s: Coord) -> Role:
        return self.roles[s[0]][s[1]]

    def tag(self, s: Coord) -> Tag:
        return self.tags[s[0]][s[1]]

    def count(self, tag: Tag) -> int:
        return sum(row.count(tag) for row in self.tags)

    @property
    def explored(self) -> int:
        return self.count(Tag.VISITED) + self.count(Tag.FRONTIER)

    @property
    def path_cells(self) -> int:
        return self.count(Tag.PATH)

    def cells_tagged(self, tag: Tag) -> List[Coord]:
        return [(r, c) for r, row in enumerate(self.tags) for c, t in enumerate(row) if t is tag]

    def to_text(self) -> str:
        lines = []
        for role_row, tag_row in zip(self.roles, self.tags):
            lines.append("".join(_ROLE_GLYPH.get(role) or _TAG_GLYPH[tag]
                                 for role, tag in zip(role_row, tag_row)))
        return "\n".join(lines)
