# navgrid/heuristics.py
"""
Distance heuristics for grid search.

All four take two integer coordinate pairs plus an optional context that
the built-ins ignore. For any pair of points

    chebyshev <= octile <= manhattan

with equality when the two points share a row or a column.
"""
from __future__ import annotations

from math import sqrt
from typing import Any, Dict, Optional

from .base import Heuristic

# Cost of one diagonal step on a unit-cost grid.
DIAGONAL_COST: float = sqrt(2.0)


def manhattan(x1: int, y1: int, x2: int, y2: int, context: Optional[Any] = None) -> float:
    return float(abs(x2 - x1) + abs(y2 - y1))


def euclidean(x1: int, y1: int, x2: int, y2: int, context: Optional[Any] = None) -> float:
    dx = x2 - x1
    dy = y2 - y1
    return sqrt(dx * dx + dy * dy)


def chebyshev(x1: int, y1: int, x2: int, y2: int, context: Optional[Any] = None) -> float:
    return float(max(abs(x2 - x1), abs(y2 - y1)))


def octile(x1: int, y1: int, x2: int, y2: int, context: Optional[Any] = None) -> float:
    """
    Exact distance on an empty 8-connected unit-cost grid:
    straight steps for the difference, diagonal steps for the overlap.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    return max(dx, dy) + (DIAGONAL_COST - 1.0) * min(dx, dy)


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
    "octile": octile,
}


def normalize_heuristic_name(name: str) -> str:
    return name.strip().lower()


def get_heuristic(name: str) -> Heuristic:
    key = normalize_heuristic_name(name)
    if key not in HEURISTICS:
        raise KeyError(
            f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        )
    return HEURISTICS[key]
