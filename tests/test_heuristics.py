"""Tests for the distance heuristics."""

from __future__ import annotations

import itertools
import math

import pytest

from navgrid import (HEURISTICS, chebyshev, euclidean, get_heuristic, manhattan,
                     normalize_heuristic_name, octile)


def test_values_for_3_4_triangle():
    assert manhattan(0, 0, 3, 4) == 7
    assert euclidean(0, 0, 3, 4) == pytest.approx(5.0)
    assert chebyshev(0, 0, 3, 4) == 4
    assert octile(0, 0, 3, 4) == pytest.approx(4 + 3 * (math.sqrt(2) - 1))
    assert chebyshev(0, 0, 3, 4) < octile(0, 0, 3, 4) < manhattan(0, 0, 3, 4)


def test_symmetric_and_zero_on_same_point():
    for h in HEURISTICS.values():
        assert h(2, 3, 2, 3) == 0
        assert h(1, 7, 4, 2) == pytest.approx(h(4, 2, 1, 7))


def test_ordering_holds_for_all_small_offsets():
    for x1, y1, x2, y2 in itertools.product(range(-3, 4), repeat=4):
        c = chebyshev(x1, y1, x2, y2)
        o = octile(x1, y1, x2, y2)
        m = manhattan(x1, y1, x2, y2)
        assert c <= o + 1e-12
        assert o <= m + 1e-12


@pytest.mark.parametrize("x2, y2", [(5, 0), (0, -6), (-2, 0)])
def test_axis_aligned_pairs_agree(x2, y2):
    expected = abs(x2) + abs(y2)
    for h in HEURISTICS.values():
        assert h(0, 0, x2, y2) == pytest.approx(expected)


def test_context_is_accepted_and_ignored():
    assert manhattan(0, 0, 1, 1, context={"weight": 3}) == 2


def test_lookup_by_name():
    assert get_heuristic("octile") is octile
    assert get_heuristic(" Manhattan ") is manhattan
    with pytest.raises(KeyError):
        get_heuristic("dijkstra")


def test_name_normalization():
    assert normalize_heuristic_name("  OctILE\t") == "octile"
