# pathgrid/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import logging
import os

from .errors import InvalidConfiguration
from .types import Coord, Role

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 25
DEFAULT_COLS = 40

# up, down, left, right
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def default_endpoints(rows: int, cols: int) -> Tuple[Coord, Coord]:
    """Start/end two cells in from opposite corners, or the corners themselves on tiny grids."""
    inset = 2 if rows >= 6 and cols >= 6 else 0
    return (inset, inset), (rows - 1 - inset, cols - 1 - inset)


def _check_dims(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise InvalidConfiguration(f"grid dimensions must be positive, got {rows}x{cols}")
    if rows * cols < 2:
        raise InvalidConfiguration("grid needs at least two cells to hold a start and an end")


@dataclass
class GridModel:
    rows: int
    cols: int
    roles: List[List[Role]]  # [row][col]
    start: Optional[Coord] = None
    end: Optional[Coord] = None

    @staticmethod
    def filled(rows: int, cols: int, role: Role = Role.EMPTY) -> "GridModel":
        _check_dims(rows, cols)
        return GridModel(rows, cols, [[role] * cols for _ in range(rows)])

    @staticmethod
    def empty(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
              start: Optional[Coord] = None, end: Optional[Coord] = None) -> "GridModel":
        grid = GridModel.filled(rows, cols, Role.EMPTY)
        d_start, d_end = default_endpoints(rows, cols)
        grid.stamp_endpoints(start if start is not None else d_start,
                             end if end is not None else d_end)
        return grid

    # ----------------- queries -----------------
    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self.rows and 0 <= c < self.cols

    def role(self, s: Coord) -> Role:
        r, c = s
        return self.roles[r][c]

    def is_wall(self, s: Coord) -> bool:
        r, c = s
        return self.roles[r][c] is Role.WALL

    def neighbors(self, s: Coord) -> List[Coord]:
        r, c = s
        out: List[Coord] = []
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols and self.roles[nr][nc] is not Role.WALL:
                out.append((nr, nc))
        return out

    def cells(self) -> Iterator[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def wall_count(self) -> int:
        return sum(row.count(Role.WALL) for row in self.roles)

    def validate(self, start: Optional[Coord] = None, end: Optional[Coord] = None) -> Tuple[Coord, Coord]:
        """Check that a run can start; returns the endpoints that will be used."""
        start = start if start is not None else self.start
        end = end if end is not None else self.end
        if start is None or end is None:
            raise InvalidConfiguration("grid has no start or no end cell")
        for name, s in (("start", start), ("end", end)):
            if not self.in_bounds(s):
                raise InvalidConfiguration(f"{name} {s} is outside the {self.rows}x{self.cols} grid")
            if self.is_wall(s):
                raise InvalidConfiguration(f"{name} {s} is on a wall")
        if start == end:
            raise InvalidConfiguration(f"start and end are the same cell {start}")
        return start, end

    # ----------------- editing -----------------
    def stamp_endpoints(self, start: Coord, end: Coord) -> None:
        """Force the start/end roles onto two cells, overwriting whatever they were."""
        for s in (start, end):
            if not self.in_bounds(s):
                raise InvalidConfiguration(f"endpoint {s} is outside the {self.rows}x{self.cols} grid")
        if start == end:
            raise InvalidConfiguration(f"start and end are the same cell {start}")
        for old in (self.start, self.end):
            if old is not None and self.role(old) in (Role.START, Role.END):
                self.roles[old[0]][old[1]] = Role.EMPTY
        self.roles[start[0]][start[1]] = Role.START
        self.roles[end[0]][end[1]] = Role.END
        self.start, self.end = start, end

    def set_wall(self, s: Coord, wall: bool = True) -> bool:
        if not self.in_bounds(s) or self.role(s) in (Role.START, Role.END):
            return False
        self.roles[s[0]][s[1]] = Role.WALL if wall else Role.EMPTY
        return True

    def toggle_wall(self, s: Coord) -> bool:
        if not self.in_bounds(s):
            return False
        return self.set_wall(s, not self.is_wall(s))

    def move_start(self, s: Coord) -> bool:
        if not self.in_bounds(s) or s == self.end:
            return False
        if self.start is not None:
            self.roles[self.start[0]][self.start[1]] = Role.EMPTY
        self.roles[s[0]][s[1]] = Role.START
        self.start = s
        return True

    def move_end(self, s: Coord) -> bool:
        if not self.in_bounds(s) or s == self.start:
            return False
        if self.end is not None:
            self.roles[self.end[0]][self.end[1]] = Role.EMPTY
        self.roles[s[0]][s[1]] = Role.END
        self.end = s
        return True

    def clear_walls(self) -> None:
        for row in self.roles:
            for c, role in enumerate(row):
                if role is Role.WALL:
                    row[c] = Role.EMPTY

    def copy(self) -> "GridModel":
        return GridModel(self.rows, self.cols, [list(row) for row in self.roles], self.start, self.end)

    # ----------------- text format -----------------
    def to_text(self) -> str:
        glyph = {Role.EMPTY: ".", Role.WALL: "#", Role.START: "S", Role.END: "E"}
        return "\n".join("".join(glyph[role] for role in row) for row in self.roles)

    @staticmethod
    def load(path: str) -> "GridModel":
        with open(path, "r") as f:
            lines = [line.strip() for line in f if line.strip()]
        if not lines:
            raise InvalidConfiguration(f"{path}: empty grid file")

        header = lines[0].split()
        if header[0] != "GRID" or len(header) != 7:
            raise InvalidConfiguration(f"{path}: expected 'GRID rows cols sr sc er ec' header")
        try:
            rows, cols, sr, sc, er, ec = map(int, header[1:])
        except ValueError as exc:
            raise InvalidConfiguration(f"{path}: non-numeric header value") from exc

        body = lines[1:]
        if len(body) != rows or any(len(line) != cols for line in body):
            raise InvalidConfiguration(f"{path}: body does not match {rows}x{cols}")
        grid = GridModel.filled(rows, cols)
        for r, line in enumerate(body):
            for c, ch in enumerate(line):
                if ch not in "01":
                    raise InvalidConfiguration(f"{path}: bad cell {ch!r} at {(r, c)}")
                if ch == "1":
                    grid.roles[r][c] = Role.WALL
        grid.stamp_endpoints((sr, sc), (er, ec))
        logger.debug("loaded %dx%d grid from %s", rows, cols, path)
        return grid

    def save(self, path: str) -> None:
        if self.start is None or self.end is None:
            raise InvalidConfiguration("cannot save a grid without start and end")
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.rows} {self.cols} {self.start[0]} {self.start[1]} {self.end[0]} {self.end[1]}\n")
            for row in self.roles:
                f.write("".join("1" if role is Role.WALL else "0" for role in row) + "\n")
