# navgrid/__init__.py
from .astar import Pathfinder
from .base import Heuristic, Pos
from .cell import CellFlags, NavCell
from .errors import PathfindingError, PathfindingErrorKind, PathResult
from .grid import NavGrid
from .heuristics import (
    HEURISTICS,
    chebyshev,
    euclidean,
    get_heuristic,
    manhattan,
    normalize_heuristic_name,
    octile,
)
from .path import Path
from .smoothing import SmoothingMode, smooth_simple

__all__ = [
    "CellFlags",
    "HEURISTICS",
    "Heuristic",
    "NavCell",
    "NavGrid",
    "Path",
    "PathResult",
    "Pathfinder",
    "PathfindingError",
    "PathfindingErrorKind",
    "Pos",
    "SmoothingMode",
    "chebyshev",
    "euclidean",
    "get_heuristic",
    "manhattan",
    "normalize_heuristic_name",
    "octile",
    "smooth_simple",
]
