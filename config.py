# config.py
from dataclasses import dataclass
from typing import Optional

from navgrid.heuristics import HEURISTICS, normalize_heuristic_name
from navgrid.smoothing import SmoothingMode


@dataclass
class Config:
    width: int = 20
    height: int = 20

    # Fraction of cells that start blocked
    obstacle_density: float = 0.20
    # Each free cell costs 1.0 + U[0, cost_jitter); 0.0 gives a unit-cost grid
    cost_jitter: float = 0.0

    allow_diagonal: bool = True
    cut_corners: bool = False

    # None -> octile on 8-connected grids, manhattan on 4-connected ones
    heuristic: Optional[str] = None
    smoothing: str = "none"       # "none" | "simple"
    max_iterations: int = 0       # 0 = unlimited

    seed: int = 0

    min_connected_ratio: float = 0.5   # share of free cells the start must reach
    max_obstacle_tries: int = 50       # avoid infinite loop

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 1:
            raise ValueError(
                f"grid must hold at least two cells, got {self.width}x{self.height}"
            )
        if not 0.0 <= self.obstacle_density < 1.0:
            raise ValueError("obstacle_density must be in [0, 1)")
        if self.cost_jitter < 0.0:
            raise ValueError("cost_jitter must be >= 0")
        if self.heuristic is not None:
            self.heuristic = normalize_heuristic_name(self.heuristic)
            if self.heuristic not in HEURISTICS:
                raise ValueError(
                    f"heuristic must be None or one of {sorted(HEURISTICS)}, got {self.heuristic!r}"
                )
        # raises ValueError on unknown names
        SmoothingMode(self.smoothing)
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be >= 0")
        if not 0.0 <= self.min_connected_ratio <= 1.0:
            raise ValueError("min_connected_ratio must be in [0, 1]")
        if self.max_obstacle_tries < 1:
            raise ValueError("max_obstacle_tries must be >= 1")
