# hill_lab/core/grid.py
# Immutable heightmap: symbol lookup, elevation lookup and the step rule.
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

Coord = Tuple[int, int]  # (row, col)

START_MARKER = "S"
GOAL_MARKER = "E"

_LOWEST = "a"
_HIGHEST = "z"

# up, down, left, right
_MOVES: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class MalformedGridError(ValueError):
    """Raised when a heightmap cannot be built from the given rows."""


def _level(symbol: str) -> int:
    if symbol == START_MARKER:
        symbol = _LOWEST
    elif symbol == GOAL_MARKER:
        symbol = _HIGHEST
    return ord(symbol) - ord(_LOWEST)


def _valid_symbol(symbol: str) -> bool:
    return symbol in (START_MARKER, GOAL_MARKER) or _LOWEST <= symbol <= _HIGHEST


def _join_row(r: int, row: Sequence[str]) -> str:
    """A row as one string; a non-str row must hold single characters."""
    if isinstance(row, str):
        return row
    for c, symbol in enumerate(row):
        if not (isinstance(symbol, str) and len(symbol) == 1):
            raise MalformedGridError(f"Cell {(r, c)} must be a single character, got {symbol!r}")
    return "".join(row)


@dataclass(frozen=True)
class HeightMap:
    """
    Rectangular grid of elevation symbols.

    - Symbols: 'a'..'z', plus 'S' (start, level of 'a') and 'E' (goal, level of 'z')
    - A step from A to a cardinal neighbor B is allowed iff elev(B) - elev(A) <= 1
      (any drop is fine, so the relation is directed)
    - Out-of-bounds lookups answer None instead of raising

    Build it with HeightMap.build(), which validates the rows.
    """

    cells: Tuple[str, ...]             # one string per row
    start: Optional[Coord]
    goal: Coord

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    # -------------------- construction --------------------

    @classmethod
    def build(
        cls,
        rows: Sequence[Sequence[str]],
        start: Optional[Coord] = None,
        goal: Optional[Coord] = None,
    ) -> "HeightMap":
        """
        Validate `rows` and build a HeightMap.

        `start`/`goal` override marker lookup when given. Without an explicit
        goal an 'E' marker must be present; the start may be absent.
        """
        cells = tuple(_join_row(r, row) for r, row in enumerate(rows))
        if not cells:
            raise MalformedGridError("Empty grid: no rows given")
        width = len(cells[0])
        if width == 0:
            raise MalformedGridError("Empty grid: first row has no cells")

        starts: List[Coord] = []
        goals: List[Coord] = []
        for r, row in enumerate(cells):
            if len(row) != width:
                raise MalformedGridError(
                    f"Row {r} has length {len(row)}, expected {width} (grid must be rectangular)"
                )
            for c, symbol in enumerate(row):
                if not _valid_symbol(symbol):
                    raise MalformedGridError(f"Unknown elevation symbol {symbol!r} at {(r, c)}")
                if symbol == START_MARKER:
                    starts.append((r, c))
                elif symbol == GOAL_MARKER:
                    goals.append((r, c))

        if len(starts) > 1:
            raise MalformedGridError(f"Multiple start markers at {starts}")
        if len(goals) > 1:
            raise MalformedGridError(f"Multiple goal markers at {goals}")

        def inside(p: Coord) -> bool:
            return 0 <= p[0] < len(cells) and 0 <= p[1] < width

        if goal is None:
            if not goals:
                raise MalformedGridError(f"Missing goal marker {GOAL_MARKER!r}")
            goal = goals[0]
        elif not inside(goal):
            raise MalformedGridError(f"Goal {goal} is outside the {len(cells)}x{width} grid")

        if start is None:
            start = starts[0] if starts else None
        elif not inside(start):
            raise MalformedGridError(f"Start {start} is outside the {len(cells)}x{width} grid")

        return cls(cells, tuple(start) if start is not None else None, tuple(goal))

    # -------------------- lookups --------------------

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def get(self, coord: Coord) -> Optional[str]:
        """Raw symbol at coord, or None when out of bounds."""
        if not self.in_bounds(coord):
            return None
        r, c = coord
        return self.cells[r][c]

    def elevation(self, coord: Coord) -> Optional[int]:
        symbol = self.get(coord)
        return None if symbol is None else _level(symbol)

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Cardinal neighbors (up, down, left, right) reachable by one admissible step."""
        here = self.elevation(coord)
        if here is None:
            return []
        r, c = coord
        out: List[Coord] = []
        for dr, dc in _MOVES:
            n = (r + dr, c + dc)
            there = self.elevation(n)
            if there is not None and there - here <= 1:
                out.append(n)
        return out

    # -------------------- scans --------------------

    def iter_cells(self) -> Iterator[Coord]:
        """All coordinates, row-major."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def find(self, symbol: str) -> List[Coord]:
        return [p for p in self.iter_cells() if self.get(p) == symbol]

    def cells_at_elevation(self, level: int) -> List[Coord]:
        return [p for p in self.iter_cells() if self.elevation(p) == level]

    def lowest_cells(self) -> List[Coord]:
        return self.cells_at_elevation(_level(_LOWEST))

    def to_array(self) -> np.ndarray:
        """Elevation levels as an int matrix of shape (rows, cols)."""
        return np.array([[_level(s) for s in row] for row in self.cells], dtype=int)

    def __str__(self) -> str:
        return "\n".join(self.cells)
