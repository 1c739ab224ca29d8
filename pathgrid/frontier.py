# pathgrid/frontier.py
"""
Pending-expansion collections shared by the four search strategies.

- PriorityFrontier: lowest priority first (A*, Dijkstra). Ties pop in the
  order cells were first inserted; a cell re-pushed with a better priority
  keeps its first insertion number.
- FifoFrontier: earliest push first (BFS).
- LifoFrontier: latest push first (DFS). Duplicate entries are allowed.
"""
from __future__ import annotations
from collections import Counter, deque
from typing import Deque, Dict, List, Tuple
import heapq

from .types import Algorithm, Coord


class Frontier:
    def push(self, cell: Coord, priority: int = 0) -> None:
        raise NotImplementedError

    def pop(self) -> Coord:
        raise NotImplementedError

    def contains(self, cell: Coord) -> bool:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return len(self) == 0

    def __contains__(self, cell: Coord) -> bool:
        return self.contains(cell)


class PriorityFrontier(Frontier):
    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Coord]] = []   # (priority, seq, cell)
        self._live: Dict[Coord, Tuple[int, int]] = {}   # cell -> (priority, seq)
        self._counter = 0

    def push(self, cell: Coord, priority: int = 0) -> None:
        entry = self._live.get(cell)
        if entry is None:
            seq = self._counter
            self._counter += 1
        else:
            seq = entry[1]
        self._live[cell] = (priority, seq)
        heapq.heappush(self._heap, (priority, seq, cell))

    def pop(self) -> Coord:
        while self._heap:
            priority, seq, cell = heapq.heappop(self._heap)
            if self._live.get(cell) == (priority, seq):
                del self._live[cell]
                return cell
            # superseded by a later re-push
        raise IndexError("pop from an empty frontier")

    def priority_of(self, cell: Coord) -> int:
        return self._live[cell][0]

    def contains(self, cell: Coord) -> bool:
        return cell in self._live

    def __len__(self) -> int:
        return len(self._live)


class FifoFrontier(Frontier):
    def __init__(self) -> None:
        self._queue: Deque[Coord] = deque()
        self._members: Counter = Counter()

    def push(self, cell: Coord, priority: int = 0) -> None:
        self._queue.append(cell)
        self._members[cell] += 1

    def pop(self) -> Coord:
        if not self._queue:
            raise IndexError("pop from an empty frontier")
        cell = self._queue.popleft()
        self._members[cell] -= 1
        if not self._members[cell]:
            del self._members[cell]
        return cell

    def contains(self, cell: Coord) -> bool:
        return cell in self._members

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier):
    def __init__(self) -> None:
        self._stack: List[Coord] = []
        self._members: Counter = Counter()

    def push(self, cell: Coord, priority: int = 0) -> None:
        self._stack.append(cell)
        self._members[cell] += 1

    def pop(self) -> Coord:
        if not self._stack:
            raise IndexError("pop from an empty frontier")
        cell = self._stack.pop()
        self._members[cell] -= 1
        if not self._members[cell]:
            del self._members[cell]
        return cell

    def contains(self, cell: Coord) -> bool:
        return cell in self._members

    def __len__(self) -> int:
        return len(self._stack)


def make_frontier(algorithm: Algorithm) -> Frontier:
    if algorithm.weighted:
        return PriorityFrontier()
    if algorithm is Algorithm.BFS:
        return FifoFrontier()
    return LifoFrontier()
