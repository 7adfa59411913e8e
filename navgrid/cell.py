# navgrid/cell.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag


class CellFlags(IntFlag):
    """
    Per-cell flag bitfield.

    Only BLOCKED has a meaning for the search. The remaining bits are
    reserved for terrain tags (water, road, ...) set by the caller.
    """
    NONE = 0
    BLOCKED = 1 << 0


@dataclass
class NavCell:
    """A single grid cell: coordinates, movement cost and flags."""
    x: int
    y: int
    cost: float = 1.0
    flags: CellFlags = CellFlags.NONE

    def __post_init__(self) -> None:
        self.set_cost(self.cost)
        self.set_flags(self.flags)

    def copy(self) -> "NavCell":
        return replace(self)

    def is_walkable(self) -> bool:
        return not self.flags & CellFlags.BLOCKED

    def has_flag(self, flag: CellFlags) -> bool:
        return bool(self.flags & flag)

    def set_flags(self, flags: CellFlags) -> None:
        # replaces, does not merge
        self.flags = CellFlags(flags)

    def set_cost(self, cost: float) -> None:
        cost = float(cost)
        # also rejects NaN
        if not cost >= 0.0:
            raise ValueError(f"cell cost must be non-negative, got {cost}")
        self.cost = cost
