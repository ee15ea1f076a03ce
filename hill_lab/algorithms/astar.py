# hill_lab/algorithms/astar.py
# A* over a HeightMap: unit step cost, 4-neighbor moves, climb at most one level per step.
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple, Union

from ..core.frontiers import OpenSet
from ..core.grid import Coord, HeightMap
from ..core.heuristics import DEFAULT_HEURISTIC, Heuristic, get_heuristic
from ..core.metrics import SearchResult, MeasuredRun
from ..core.utils import reconstruct_path, path_cost

logger = logging.getLogger(__name__)


def _resolve(heuristic: Union[str, Heuristic]) -> Tuple[str, Heuristic]:
    if isinstance(heuristic, str):
        return heuristic, get_heuristic(heuristic)
    return getattr(heuristic, "__name__", "custom"), heuristic


class PathFinder:
    """
    Shortest path from a start cell to the grid's goal.

    Every call builds its own open set / came-from / g-score maps, so one
    PathFinder can serve any number of searches over the same grid.
    """

    def __init__(self, grid: HeightMap, heuristic: Union[str, Heuristic] = DEFAULT_HEURISTIC):
        self.grid = grid
        self.heuristic_name, self.h = _resolve(heuristic)

    @property
    def name(self) -> str:
        return f"A*({self.heuristic_name})"

    def find_path(self, start: Coord) -> Optional[List[Coord]]:
        """Cells from start to goal inclusive, or None when the goal is unreachable."""
        path, _ = self.run(start)
        return path

    def search(self, start: Coord) -> SearchResult:
        """find_path() plus timing, peak memory and expansion count."""
        with MeasuredRun() as meter:
            path, expanded = self.run(start)
        if path is None:
            return SearchResult(self.name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)
        return SearchResult(self.name, True, path, float(path_cost(path)), expanded, meter.elapsed, meter.peak_kb)

    # -------------------- search loop --------------------

    def run(self, start: Coord) -> Tuple[Optional[List[Coord]], int]:
        """Unmeasured search; returns (path or None, nodes expanded)."""
        grid = self.grid
        if not grid.in_bounds(start):
            raise ValueError(f"Start {start} is outside the {grid.rows}x{grid.cols} grid")
        goal = grid.goal
        start = tuple(start)

        open_set = OpenSet()
        came_from: Dict[Coord, Coord] = {}
        g: Dict[Coord, int] = {start: 0}
        open_set.push(start, self.h(start, goal))
        expanded = 0

        logger.debug("%s: searching %s -> %s", self.name, start, goal)
        while open_set:
            current = open_set.pop()
            if current == goal:
                path = reconstruct_path(came_from, current)
                logger.debug("%s: reached goal in %d steps, %d expanded", self.name, len(path) - 1, expanded)
                return path, expanded

            expanded += 1
            tentative = g[current] + 1
            for n in grid.neighbors(current):
                if tentative < g.get(n, float("inf")):
                    came_from[n] = current
                    g[n] = tentative
                    open_set.push(n, tentative + self.h(n, goal))

        logger.debug("%s: goal %s unreachable from %s (%d expanded)", self.name, goal, start, expanded)
        return None, expanded


def a_star_search(grid: HeightMap, start: Optional[Coord] = None,
                  heuristic: Union[str, Heuristic] = DEFAULT_HEURISTIC) -> SearchResult:
    """Measured search from `start`, defaulting to the grid's 'S' cell."""
    start = start if start is not None else grid.start
    if start is None:
        raise ValueError("Grid has no start marker and no start was given")
    return PathFinder(grid, heuristic).search(start)
