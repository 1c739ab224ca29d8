# pathgrid/search.py
"""
Step-driven search engine: A*, Dijkstra, BFS and DFS as frontier-policy
variants of one pop-and-expand loop.

A driver calls start() once, then step() until the returned snapshot has a
terminal status (FOUND or EXHAUSTED). Each step() does one expansion, so
pausing, single-stepping and running to completion are all just different
ways of calling step().

The grid must not be edited while a run is RUNNING; cancel() first.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set
import logging

from .errors import NoActiveRun
from .frontier import Frontier, make_frontier
from .grid import GridModel
from .heuristics import manhattan, zero
from .path import reconstruct
from .snapshot import Snapshot
from .types import Algorithm, Coord, Role, Status, Tag

logger = logging.getLogger(__name__)

Heuristic = Callable[[Coord, Coord], int]


def heuristic_for(algorithm: Algorithm) -> Heuristic:
    return manhattan if algorithm is Algorithm.ASTAR else zero


@dataclass
class RunState:
    grid: GridModel
    algorithm: Algorithm
    start: Coord
    end: Coord
    frontier: Frontier
    tags: List[List[Tag]]
    cost: Dict[Coord, int] = field(default_factory=dict)       # g
    priority: Dict[Coord, int] = field(default_factory=dict)   # f (g for Dijkstra)
    parent: Dict[Coord, Coord] = field(default_factory=dict)
    closed: Set[Coord] = field(default_factory=set)
    closed_cost: Dict[Coord, int] = field(default_factory=dict)
    discovered: Set[Coord] = field(default_factory=set)        # BFS: marked at push time
    fresh: List[Coord] = field(default_factory=list)           # tagged FRONTIER by the last step
    steps: int = 0
    expansions: int = 0

    def tag(self, s: Coord, tag: Tag) -> None:
        if self.grid.role(s) in (Role.START, Role.END):
            return
        self.tags[s[0]][s[1]] = tag


class SearchStepper:
    def __init__(self) -> None:
        self.grid: Optional[GridModel] = None
        self.run: Optional[RunState] = None
        self._status = Status.IDLE
        self._current: Optional[Coord] = None
        self._h: Heuristic = zero

    @property
    def status(self) -> Status:
        return self._status

    # -------------------- lifecycle --------------------

    def start(self, grid: GridModel, algorithm: Algorithm = Algorithm.ASTAR,
              start: Optional[Coord] = None, end: Optional[Coord] = None) -> Snapshot:
        """Validate the configuration and seed a fresh run with the start cell."""
        algorithm = Algorithm(algorithm)
        self.cancel()
        s, e = grid.validate(start, end)
        if (s, e) != (grid.start, grid.end):
            # explicit endpoints: the run gets its own copy with them stamped
            grid = grid.copy()
            grid.stamp_endpoints(s, e)

        self.grid = grid
        self._h = heuristic_for(algorithm)
        run = RunState(
            grid=grid,
            algorithm=algorithm,
            start=s,
            end=e,
            frontier=make_frontier(algorithm),
            tags=[[Tag.UNVISITED] * grid.cols for _ in range(grid.rows)],
        )
        run.cost[s] = 0
        run.priority[s] = self._h(s, e)
        run.frontier.push(s, run.priority[s])
        if algorithm is Algorithm.BFS:
            run.discovered.add(s)

        self.run = run
        self._status = Status.RUNNING
        logger.debug("started %s run %s -> %s on %dx%d grid",
                     algorithm.label, s, e, grid.rows, grid.cols)
        return self.snapshot()

    def cancel(self) -> None:
        if self.run is not None and self._status is Status.RUNNING:
            logger.debug("cancelled %s run after %d steps", self.run.algorithm.label, self.run.steps)
        self.run = None
        self._current = None
        self._status = Status.IDLE

    def snapshot(self) -> Snapshot:
        run = self._require_run()
        return Snapshot.capture(self.grid, run.tags, self._status, run.steps, self._current)

    # -------------------- main stepping logic --------------------

    def step(self) -> Snapshot:
        """
        Run ONE expansion:
          - Pop the next cell from the frontier (EXHAUSTED if there is none).
          - If it is the end cell, stop with FOUND.
          - Else close it and push its open neighbours.
        """
        run = self._require_run()
        if self._status.terminal:
            return self.snapshot()

        for s in run.fresh:
            if run.tags[s[0]][s[1]] is Tag.FRONTIER:
                run.tags[s[0]][s[1]] = Tag.VISITED
        run.fresh = []
        run.steps += 1

        current = self._pop_open(run)
        if current is None:
            self._current = None
            self._finish(Status.EXHAUSTED)
            return self.snapshot()
        self._current = current

        if current == run.end:
            self._finish(Status.FOUND)
            return self.snapshot()

        run.closed.add(current)
        run.expansions += 1
        run.tag(current, Tag.VISITED)

        if run.algorithm.weighted:
            run.closed_cost[current] = run.cost[current]
            self._expand_weighted(run, current)
        elif run.algorithm is Algorithm.BFS:
            self._expand_bfs(run, current)
        else:
            self._expand_dfs(run, current)

        return self.snapshot()

    def reconstruct_path(self) -> List[Coord]:
        run = self._require_run()
        if self._status is not Status.FOUND:
            raise NoActiveRun(f"no path to reconstruct while {self._status.value}")
        return reconstruct(run, run.end)

    # -------------------- helpers --------------------

    def _require_run(self) -> RunState:
        if self.run is None or self.grid is None:
            raise NoActiveRun("no active run; call start() first")
        return self.run

    def _finish(self, status: Status) -> None:
        self._status = status
        run = self.run
        logger.debug("%s run %s after %d steps (%d expansions)",
                     run.algorithm.label, status.value, run.steps, run.expansions)

    def _pop_open(self, run: RunState) -> Optional[Coord]:
        # DFS can hold several entries for one cell; only the first pop counts
        while not run.frontier.is_empty():
            s = run.frontier.pop()
            if s not in run.closed:
                return s
        return None

    def _discover(self, run: RunState, s: Coord) -> None:
        run.tag(s, Tag.FRONTIER)
        run.fresh.append(s)

    def _expand_weighted(self, run: RunState, current: Coord) -> None:
        for nb in self.grid.neighbors(current):
            if nb in run.closed:
                continue
            tentative = run.cost[current] + 1
            if nb not in run.cost or tentative < run.cost[nb]:
                run.cost[nb] = tentative
                run.parent[nb] = current
                run.priority[nb] = tentative + self._h(nb, run.end)
                run.frontier.push(nb, run.priority[nb])
                self._discover(run, nb)

    def _expand_bfs(self, run: RunState, current: Coord) -> None:
        for nb in self.grid.neighbors(current):
            if nb in run.discovered:
                continue
            run.discovered.add(nb)
            run.parent[nb] = current
            run.cost[nb] = run.cost[current] + 1
            run.frontier.push(nb)
            self._discover(run, nb)

    def _expand_dfs(self, run: RunState, current: Coord) -> None:
        # reversed so the first neighbour (up) ends on top of the stack
        for nb in reversed(self.grid.neighbors(current)):
            if nb in run.closed:
                continue
            run.parent[nb] = current
            run.cost[nb] = run.cost[current] + 1
            run.frontier.push(nb)
            self._discover(run, nb)
