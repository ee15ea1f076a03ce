# hill_lab/core/frontiers.py
from __future__ import annotations
import heapq
from typing import Dict, List, Tuple

from .grid import Coord


class OpenSet:
    """
    A* open set: membership plus min-f extraction.

    Min-heap of (f, counter, coord). Re-adding a coord with a lower f leaves the
    old entry in the heap; pop() skips entries whose f no longer matches.
    Equal f pops in insertion order (counter), so runs are reproducible.
    """
    def __init__(self):
        self.h: List[Tuple[float, int, Coord]] = []
        self.f: Dict[Coord, float] = {}
        self.counter = 0  # tie-breaker for stability

    def push(self, x: Coord, f: float):
        self.counter += 1
        self.f[x] = f
        heapq.heappush(self.h, (f, self.counter, x))

    def pop(self) -> Coord:
        while self.h:
            f, _, x = heapq.heappop(self.h)
            if self.f.get(x) == f:
                del self.f[x]
                return x
        raise IndexError("pop from an empty open set")

    def __contains__(self, x): return x in self.f
    def __len__(self): return len(self.f)
