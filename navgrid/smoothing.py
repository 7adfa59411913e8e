# navgrid/smoothing.py
from __future__ import annotations

from enum import Enum
from typing import List

from .path import Path


class SmoothingMode(Enum):
    NONE = "none"
    SIMPLE = "simple"  # drop points where the direction does not change


def smooth_simple(path: Path) -> None:
    """
    Collapse straight runs in place, keeping only the first point, the
    last point and every point where the step direction changes.

    total_cost is left as is: the walked cells are the same.
    """
    pts = path.points()
    if len(pts) <= 2:
        return

    keep: List[int] = [0]
    prev_step = (0, 0)
    for i in range(1, len(pts)):
        step = (pts[i][0] - pts[i - 1][0], pts[i][1] - pts[i - 1][1])
        if step != prev_step:
            if i > 1:
                keep.append(i - 1)
            prev_step = step
    if keep[-1] != len(pts) - 1:
        keep.append(len(pts) - 1)

    if len(keep) == len(pts):
        return

    path.clear()
    for idx in keep:
        path.append(*pts[idx])
