# navgrid/base.py
from typing import Any, Optional, Protocol, Tuple

Pos = Tuple[int, int]  # (x, y) with x = col, y = row


class Heuristic(Protocol):
    """
    Distance estimate between two cells.

    `context` is an opaque value handed back unchanged on every call, so a
    heuristic can be parameterized (weights, lookup tables, ...) without a
    closure.
    """

    def __call__(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        context: Optional[Any] = None,
    ) -> float:
        ...
