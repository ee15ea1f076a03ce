# hill_lab/core/utils.py
# Path reconstruction from came-from back-pointers, and checks over finished paths.
from __future__ import annotations
from typing import Mapping, List, Sequence

from .grid import Coord, HeightMap


def reconstruct_path(came_from: Mapping[Coord, Coord], end: Coord) -> List[Coord]:
    """Walk back-pointers from `end` until a cell with no predecessor; returns start..end."""
    path = [end]
    cur = end
    while cur in came_from:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()
    return path


def path_cost(path: Sequence[Coord]) -> int:
    return max(len(path) - 1, 0)


def is_valid_path(grid: HeightMap, path: Sequence[Coord]) -> bool:
    """True iff every consecutive pair is a single cardinal step that the grid allows."""
    if not path:
        return False
    for a, b in zip(path, path[1:]):
        if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
            return False
        if b not in grid.neighbors(a):
            return False
    return grid.in_bounds(path[0])
