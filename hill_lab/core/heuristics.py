# hill_lab/core/heuristics.py
# Remaining-cost estimates from a cell to the goal. All of them are admissible on a
# 4-neighbor unit-cost grid (none exceeds the Manhattan distance).
from __future__ import annotations
import math
from typing import Callable, Dict

from .grid import Coord

Heuristic = Callable[[Coord, Coord], float]


def manhattan(p: Coord, goal: Coord) -> float:
    return float(abs(p[0] - goal[0]) + abs(p[1] - goal[1]))


def euclidean(p: Coord, goal: Coord) -> float:
    return math.hypot(p[0] - goal[0], p[1] - goal[1])


def rounded_euclidean(p: Coord, goal: Coord) -> float:
    # round() never lifts the value above the (integer) Manhattan distance
    return float(round(euclidean(p, goal)))


def zero(p: Coord, goal: Coord) -> float:
    """h = 0 turns A* into uniform-cost search."""
    return 0.0


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "rounded_euclidean": rounded_euclidean,
    "zero": zero,
}

DEFAULT_HEURISTIC = "manhattan"


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}; choose one of {', '.join(sorted(HEURISTICS))}"
        ) from None
