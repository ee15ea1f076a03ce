# hill_lab/algorithms/multi_source.py
# Best path to the goal over several candidate starts: one independent A* per start.
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Union

from .astar import PathFinder
from ..core.grid import Coord, HeightMap
from ..core.heuristics import DEFAULT_HEURISTIC, Heuristic
from ..core.metrics import SearchResult, MeasuredRun
from ..core.utils import path_cost

logger = logging.getLogger(__name__)


def start_candidates(grid: HeightMap) -> List[Coord]:
    """Every cell at the lowest elevation ('a' and 'S'), row-major."""
    return grid.lowest_cells()


def find_shortest_from_any(
    grid: HeightMap,
    starts: Optional[Iterable[Coord]] = None,
    heuristic: Union[str, Heuristic] = DEFAULT_HEURISTIC,
) -> Optional[List[Coord]]:
    """Shortest path over all `starts` (default: start_candidates), or None if none reaches the goal."""
    return search_from_any(grid, starts, heuristic).path or None


def search_from_any(
    grid: HeightMap,
    starts: Optional[Iterable[Coord]] = None,
    heuristic: Union[str, Heuristic] = DEFAULT_HEURISTIC,
) -> SearchResult:
    """
    Runs PathFinder once per start and keeps the shortest path.
    Starts with no path are skipped; on equal length the earlier start wins.
    nodes_expanded is summed over all runs.
    """
    finder = PathFinder(grid, heuristic)
    name = f"MultiSource {finder.name}"
    candidates = list(start_candidates(grid) if starts is None else starts)

    best: Optional[List[Coord]] = None
    expanded = 0
    with MeasuredRun() as meter:
        for s in candidates:
            path, n = finder.run(s)
            expanded += n
            if path is None:
                logger.debug("%s: no path from %s", name, s)
                continue
            if best is None or len(path) < len(best):
                best = path

    logger.debug("%s: %d starts tried, best=%s", name, len(candidates),
                 None if best is None else path_cost(best))
    if best is None:
        return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                            starts_tried=len(candidates))
    return SearchResult(name, True, best, float(path_cost(best)), expanded, meter.elapsed, meter.peak_kb,
                        starts_tried=len(candidates))
