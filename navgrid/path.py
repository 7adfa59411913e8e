# navgrid/path.py
from __future__ import annotations

from typing import Iterator, List, Optional

from .base import Pos


class Path:
    """
    Ordered sequence of grid coordinates plus the cost of walking it.

    The path does not validate adjacency or uniqueness of its points;
    total_cost is whatever the producer set (0.0 for a fresh path).
    """

    def __init__(self) -> None:
        self._points: List[Pos] = []
        self.total_cost: float = 0.0

    def append(self, x: int, y: int) -> None:
        self._points.append((x, y))

    def prepend(self, x: int, y: int) -> None:
        self._points.insert(0, (x, y))

    def get_point(self, index: int) -> Optional[Pos]:
        """Point at `index`, or None when the index is out of range."""
        if 0 <= index < len(self._points):
            return self._points[index]
        return None

    def get_start(self) -> Optional[Pos]:
        return self.get_point(0)

    def get_end(self) -> Optional[Pos]:
        return self.get_point(len(self._points) - 1)

    def reverse(self) -> None:
        self._points.reverse()

    def copy(self) -> "Path":
        dup = Path()
        dup._points = list(self._points)
        dup.total_cost = self.total_cost
        return dup

    def clear(self) -> None:
        self._points.clear()

    def points(self) -> List[Pos]:
        return list(self._points)

    def get_length(self) -> int:
        return len(self._points)

    def is_empty(self) -> bool:
        return not self._points

    def get_total_cost(self) -> float:
        return self.total_cost

    def set_total_cost(self, cost: float) -> None:
        self.total_cost = float(cost)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Pos]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._points == other._points and self.total_cost == other.total_cost

    def __repr__(self) -> str:
        return f"Path(points={self._points!r}, total_cost={self.total_cost:.3f})"
