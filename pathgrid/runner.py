# pathgrid/runner.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import logging
import time

from .grid import GridModel
from .search import SearchStepper
from .snapshot import Snapshot
from .types import Algorithm, Coord, Status

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    algorithm: Algorithm
    reached: bool
    steps: int
    explored: int
    path_length: int          # cells, endpoints included; 0 when not reached
    elapsed_sec: float
    path: List[Coord] = field(default_factory=list)
    final: Optional[Snapshot] = None


def run_search(grid: GridModel,
               algorithm: Algorithm = Algorithm.ASTAR,
               start: Optional[Coord] = None,
               end: Optional[Coord] = None,
               max_steps: Optional[int] = None,
               on_snapshot: Optional[Callable[[Snapshot], None]] = None) -> RunStats:
    """Drive one run in a tight loop and reconstruct the path if the end was reached."""
    stepper = SearchStepper()
    t0 = time.perf_counter()
    snap = stepper.start(grid, algorithm, start, end)
    if on_snapshot:
        on_snapshot(snap)

    while not snap.status.terminal:
        if max_steps is not None and snap.step >= max_steps:
            logger.info("%s stopped after max_steps=%d", Algorithm(algorithm).label, max_steps)
            break
        snap = stepper.step()
        if on_snapshot:
            on_snapshot(snap)

    path: List[Coord] = []
    if snap.status is Status.FOUND:
        path = stepper.reconstruct_path()
        snap = stepper.snapshot()
        if on_snapshot:
            on_snapshot(snap)
    elapsed = time.perf_counter() - t0

    return RunStats(
        algorithm=Algorithm(algorithm),
        reached=snap.status is Status.FOUND,
        steps=snap.step,
        explored=snap.explored,
        path_length=len(path),
        elapsed_sec=elapsed,
        path=path,
        final=snap,
    )


def run_all(grid: GridModel, start: Optional[Coord] = None,
            end: Optional[Coord] = None) -> List[Tuple[Algorithm, RunStats]]:
    return [(alg, run_search(grid, alg, start, end)) for alg in Algorithm]
