import pytest

from hill_lab.algorithms.astar import PathFinder
from hill_lab.algorithms.multi_source import (
    find_shortest_from_any, search_from_any, start_candidates,
)
from hill_lab.core.grid import HeightMap
from hill_lab.core.utils import is_valid_path
from hill_lab.problems.samples import walled_heightmap

# (0,0) is 26 steps out, (0,1) is 25, (1,13) is boxed in by 'm' and 'z'
TWO_STARTS = HeightMap.build([
    "aabcdefghijklmnopqrstuvwxyE",
    "z" * 13 + "a" + "z" * 13,
])


def test_sample_best_start(sample):
    path = find_shortest_from_any(sample)
    assert len(path) - 1 == 29
    assert path[-1] == sample.goal
    assert is_valid_path(sample, path)


def test_candidates():
    assert start_candidates(TWO_STARTS) == [(0, 0), (0, 1), (1, 13)]


def test_takes_minimum_not_first_start():
    assert PathFinder(TWO_STARTS).find_path((0, 0)) is not None
    path = find_shortest_from_any(TWO_STARTS)
    assert path[0] == (0, 1)
    assert len(path) - 1 == 25


@pytest.mark.parametrize("starts", [[(0, 0), (0, 1)], [(0, 1), (0, 0)], [(1, 13), (0, 1), (0, 0)]])
def test_start_order_does_not_matter(starts):
    assert len(find_shortest_from_any(TWO_STARTS, starts)) - 1 == 25


def test_unreachable_starts_are_skipped():
    r = search_from_any(TWO_STARTS, heuristic="rounded_euclidean")
    assert r.success
    assert r.cost == 25
    assert r.starts_tried == 3
    assert r.algo == "MultiSource A*(rounded_euclidean)"


def test_no_start_reaches_goal():
    assert find_shortest_from_any(walled_heightmap()) is None
    r = search_from_any(walled_heightmap())
    assert not r.success
    assert r.cost == float("inf")


def test_empty_starts():
    assert find_shortest_from_any(TWO_STARTS, []) is None


def test_matches_single_searches(sample):
    finder = PathFinder(sample)
    lengths = [len(p) for p in map(finder.find_path, start_candidates(sample)) if p]
    assert len(find_shortest_from_any(sample)) == min(lengths)
