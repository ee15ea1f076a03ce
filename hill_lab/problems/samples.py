# hill_lab/problems/samples.py
from __future__ import annotations

from ..core.grid import HeightMap

# Shortest climb from S is 31 steps; from the best 'a' cell it is 29.
SAMPLE_ROWS = (
    "Sabqponm",
    "abcryxxl",
    "accszExk",
    "acctuvwj",
    "abdefghi",
)

# Goal ringed by 'z' cells that nothing below 'y' can climb onto.
WALLED_ROWS = (
    "Sbcdefg",
    "abzzzgh",
    "abzEzhi",
    "abzzzij",
)


def sample_heightmap() -> HeightMap:
    return HeightMap.build(SAMPLE_ROWS)


def walled_heightmap() -> HeightMap:
    return HeightMap.build(WALLED_ROWS)
