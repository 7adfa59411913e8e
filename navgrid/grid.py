# navgrid/grid.py
from __future__ import annotations

from math import inf
from typing import List, Optional

import numpy as np
from loguru import logger

from .base import Pos
from .cell import CellFlags, NavCell

# N, E, S, W, then NE, SE, SW, NW
_DIRECTIONS: List[Pos] = [
    (0, -1), (1, 0), (0, 1), (-1, 0),
    (1, -1), (1, 1), (-1, 1), (-1, -1),
]


class NavGrid:
    """
    Fixed-size 2D grid of NavCells, stored row-major (index = y * width + x).

    Cells are created once at construction; afterwards only their flags and
    costs change. Two grid-wide switches shape the movement graph:

      - allow_diagonal: also connect the 4 diagonal neighbours
      - cut_corners: let a diagonal step pass between two blocked
        cardinal cells

    Out-of-range coordinates are never an error here: queries return
    "nothing" (None, False, inf) and mutations are ignored.
    """

    def __init__(self, width: int, height: int) -> None:
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{label} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{label} must be >= 0, got {value}")

        self._width = width
        self._height = height
        self._cells: List[NavCell] = [
            NavCell(i % width, i // width) for i in range(width * height)
        ]
        self.allow_diagonal: bool = True
        self.cut_corners: bool = False
        # cheapest walkable cost, recomputed after a mutation
        self._cost_floor: Optional[float] = None

        logger.debug("Created navigation grid {}x{}", width, height)

    # ------------------------------------------------------------------ #
    # numpy interop                                                      #
    # ------------------------------------------------------------------ #
    @classmethod
    def from_arrays(
        cls,
        costs: np.ndarray,
        blocked: Optional[np.ndarray] = None,
    ) -> "NavGrid":
        """
        Build a grid from a (height, width) cost array and an optional
        boolean mask of the same shape (True = blocked).
        """
        costs = np.asarray(costs, dtype=float)
        if costs.ndim != 2:
            raise ValueError(f"costs must be 2D (height, width), got shape {costs.shape}")
        if blocked is not None:
            blocked = np.asarray(blocked, dtype=bool)
            if blocked.shape != costs.shape:
                raise ValueError(
                    f"blocked mask shape {blocked.shape} does not match costs {costs.shape}"
                )

        height, width = costs.shape
        grid = cls(int(width), int(height))
        for cell in grid._cells:
            cell.set_cost(costs[cell.y, cell.x])
            if blocked is not None and blocked[cell.y, cell.x]:
                cell.flags = CellFlags.BLOCKED
        return grid

    def cost_array(self) -> np.ndarray:
        """Cell costs as a (height, width) float array."""
        out = np.empty((self._height, self._width), dtype=float)
        for cell in self._cells:
            out[cell.y, cell.x] = cell.cost
        return out

    def blocked_mask(self) -> np.ndarray:
        """(height, width) boolean array, True where the cell is blocked."""
        out = np.zeros((self._height, self._width), dtype=bool)
        for cell in self._cells:
            out[cell.y, cell.x] = not cell.is_walkable()
        return out

    # ------------------------------------------------------------------ #
    # Basic queries                                                      #
    # ------------------------------------------------------------------ #
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell(self, x: int, y: int) -> Optional[NavCell]:
        """
        The grid's own cell at (x, y), or None out of range.

        Change cells through the grid's setters: editing the returned cell
        directly does not refresh the cached walkable_cost_floor.
        """
        if not self.is_valid(x, y):
            return None
        return self._cells[y * self._width + x]

    def is_walkable(self, x: int, y: int) -> bool:
        cell = self.get_cell(x, y)
        return cell is not None and cell.is_walkable()

    def get_cell_cost(self, x: int, y: int) -> float:
        cell = self.get_cell(x, y)
        if cell is None:
            return inf
        return cell.cost

    def get_cell_flags(self, x: int, y: int) -> CellFlags:
        cell = self.get_cell(x, y)
        if cell is None:
            return CellFlags.NONE
        return cell.flags

    def walkable_cost_floor(self) -> float:
        """Cheapest cost of any walkable cell (0.0 if nothing is walkable)."""
        if self._cost_floor is None:
            costs = [c.cost for c in self._cells if c.is_walkable()]
            self._cost_floor = min(costs) if costs else 0.0
        return self._cost_floor

    # ------------------------------------------------------------------ #
    # Mutation                                                           #
    # ------------------------------------------------------------------ #
    def set_cell_cost(self, x: int, y: int, cost: float) -> None:
        cell = self.get_cell(x, y)
        if cell is not None:
            cell.set_cost(cost)
            self._cost_floor = None

    def set_cell_flags(self, x: int, y: int, flags: CellFlags) -> None:
        cell = self.get_cell(x, y)
        if cell is not None:
            cell.set_flags(flags)
            self._cost_floor = None

    def set_blocked(self, x: int, y: int, blocked: bool) -> None:
        cell = self.get_cell(x, y)
        if cell is None:
            return
        if blocked:
            cell.set_flags(cell.flags | CellFlags.BLOCKED)
        else:
            cell.set_flags(cell.flags & ~int(CellFlags.BLOCKED))
        self._cost_floor = None

    def fill_rect(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        flags: CellFlags,
        cost: float,
    ) -> None:
        """
        Apply flags and cost to every in-range cell of [x, x+w) x [y, y+h).

        A rejected cost raises ValueError before any cell is touched.
        """
        template = NavCell(x, y, cost, flags)
        for cy in range(y, y + h):
            for cx in range(x, x + w):
                cell = self.get_cell(cx, cy)
                if cell is not None:
                    cell.set_flags(template.flags)
                    cell.set_cost(template.cost)
        self._cost_floor = None

    def clear(self) -> None:
        """Reset every cell to cost 1.0 with no flags."""
        for cell in self._cells:
            cell.set_cost(1.0)
            cell.set_flags(CellFlags.NONE)
        self._cost_floor = None
        logger.debug("Cleared navigation grid")

    # ------------------------------------------------------------------ #
    # Movement policy                                                    #
    # ------------------------------------------------------------------ #
    def get_allow_diagonal(self) -> bool:
        return self.allow_diagonal

    def set_allow_diagonal(self, allow: bool) -> None:
        self.allow_diagonal = bool(allow)

    def get_cut_corners(self) -> bool:
        return self.cut_corners

    def set_cut_corners(self, allow: bool) -> None:
        self.cut_corners = bool(allow)

    def neighbors(self, x: int, y: int) -> List[Pos]:
        """
        Walkable cells reachable from (x, y) in one step.

        A diagonal step is refused when both cardinal cells it passes
        between are blocked, unless cut_corners is set.
        """
        n_dirs = 8 if self.allow_diagonal else 4
        result: List[Pos] = []

        for i in range(n_dirs):
            dx, dy = _DIRECTIONS[i]
            nx, ny = x + dx, y + dy
            if not self.is_walkable(nx, ny):
                continue
            if i >= 4 and not self.cut_corners:
                if not (self.is_walkable(x + dx, y) or self.is_walkable(x, y + dy)):
                    continue
            result.append((nx, ny))

        return result

    def __repr__(self) -> str:
        return (
            f"NavGrid(width={self._width}, height={self._height}, "
            f"allow_diagonal={self.allow_diagonal}, cut_corners={self.cut_corners})"
        )
