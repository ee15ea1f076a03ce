# hill_lab/problems/parsing.py
# Line-based ingestion: heightmap text -> HeightMap.
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from ..core.grid import Coord, HeightMap

logger = logging.getLogger(__name__)


def _grid_lines(lines: Iterable[str]) -> List[str]:
    """Leading blank lines are skipped; the grid ends at the first blank line after it."""
    rows: List[str] = []
    for line in lines:
        line = line.rstrip()
        if not line:
            if rows:
                break
            continue
        rows.append(line)
    return rows


def _build(rows: List[str], start: Optional[Coord], goal: Optional[Coord]) -> HeightMap:
    grid = HeightMap.build(rows, start=start, goal=goal)
    logger.debug("parsed %dx%d heightmap, start=%s goal=%s", grid.rows, grid.cols, grid.start, grid.goal)
    return grid


def parse_heightmap(text: str, start: Optional[Coord] = None, goal: Optional[Coord] = None) -> HeightMap:
    return _build(_grid_lines(text.splitlines()), start, goal)


def read_heightmap(stream: TextIO, start: Optional[Coord] = None, goal: Optional[Coord] = None) -> HeightMap:
    """Parse from an open text stream (e.g. sys.stdin); reading stops at the first blank line."""
    return _build(_grid_lines(stream), start, goal)


def load_heightmap(path: Union[str, Path], start: Optional[Coord] = None, goal: Optional[Coord] = None) -> HeightMap:
    return parse_heightmap(Path(path).read_text(), start=start, goal=goal)
