# navgrid/astar.py
from __future__ import annotations

from heapq import heappop, heappush
from math import inf
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from loguru import logger

from .base import Heuristic, Pos
from .errors import PathfindingErrorKind, PathResult
from .grid import NavGrid
from .heuristics import DIAGONAL_COST, get_heuristic, manhattan, octile
from .path import Path
from .smoothing import SmoothingMode, smooth_simple


class Pathfinder:
    """
    A* path planner over a NavGrid.

    Movement follows the grid's policy (4- or 8-connected, corner cutting).
    Entering a cell costs that cell's cost, scaled by sqrt(2) for a
    diagonal step; the returned Path.total_cost is the sum over the walk.

    Without an explicit heuristic the planner uses octile distance on
    8-connected grids and Manhattan distance on 4-connected ones, both
    scaled by the cheapest walkable cell cost so the estimate never
    exceeds the true remaining cost. Paths are then optimal.

    The planner keeps no search state between calls, only diagnostics:
    the number of nodes expanded by the last call plus timing stats.
    """

    name = "AStar"

    def __init__(
        self,
        grid: Optional[NavGrid] = None,
        heuristic: Union[Heuristic, str, None] = None,
        context: Optional[Any] = None,
        smoothing: SmoothingMode = SmoothingMode.NONE,
        max_iterations: int = 0,
    ) -> None:
        self._grid = grid
        self._heuristic: Optional[Heuristic] = None
        self._context: Optional[Any] = None
        self.set_heuristic(heuristic, context)

        self.smoothing = SmoothingMode(smoothing)
        self.set_max_iterations(max_iterations)

        self.last_nodes_explored: int = 0

        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ---- configuration ----

    def get_grid(self) -> Optional[NavGrid]:
        return self._grid

    def set_grid(self, grid: Optional[NavGrid]) -> None:
        self._grid = grid

    def set_heuristic(
        self,
        heuristic: Union[Heuristic, str, None],
        context: Optional[Any] = None,
    ) -> None:
        """Use `heuristic` (callable or registered name); None restores the default."""
        if isinstance(heuristic, str):
            heuristic = get_heuristic(heuristic)
        self._heuristic = heuristic
        self._context = context if heuristic is not None else None

    def get_heuristic(self) -> Optional[Heuristic]:
        return self._heuristic

    def set_max_iterations(self, max_iterations: int) -> None:
        """Cap node expansions per search; 0 means unlimited."""
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")
        self.max_iterations = int(max_iterations)

    # ---- stats API ----

    def get_last_nodes_explored(self) -> int:
        return self.last_nodes_explored

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1

    # ---- main planning API ----

    def find_path(self, start_x: int, start_y: int, goal_x: int, goal_y: int) -> PathResult:
        """
        Search for the cheapest path from start to goal (both inclusive).

        Never raises for bad input: failures come back as a PathResult
        whose error kind is NO_GRID, INVALID_START, INVALID_GOAL or NO_PATH.
        """
        t0 = perf_counter()
        result = self._find_path(start_x, start_y, goal_x, goal_y)
        self._update_stats(perf_counter() - t0)

        if result.ok:
            path = result.path
            logger.debug(
                "Found path with {} points, cost {:.2f}, explored {} nodes",
                path.get_length(),
                path.total_cost,
                self.last_nodes_explored,
            )
        else:
            logger.debug("Pathfinding failed ({}): {}", result.kind.name, result.error.message)
        return result

    def is_reachable(self, start_x: int, start_y: int, goal_x: int, goal_y: int) -> bool:
        return self.find_path(start_x, start_y, goal_x, goal_y).ok

    # ---- internals ----

    def _find_path(self, start_x: int, start_y: int, goal_x: int, goal_y: int) -> PathResult:
        self.last_nodes_explored = 0
        grid = self._grid

        if grid is None:
            return PathResult.failure(PathfindingErrorKind.NO_GRID, "No navigation grid set")

        if not grid.is_valid(start_x, start_y):
            return PathResult.failure(
                PathfindingErrorKind.INVALID_START,
                f"Invalid start position ({start_x}, {start_y})",
            )
        if not grid.is_walkable(start_x, start_y):
            return PathResult.failure(
                PathfindingErrorKind.INVALID_START,
                f"Start position ({start_x}, {start_y}) is not walkable",
            )
        if not grid.is_valid(goal_x, goal_y):
            return PathResult.failure(
                PathfindingErrorKind.INVALID_GOAL,
                f"Invalid goal position ({goal_x}, {goal_y})",
            )
        if not grid.is_walkable(goal_x, goal_y):
            return PathResult.failure(
                PathfindingErrorKind.INVALID_GOAL,
                f"Goal position ({goal_x}, {goal_y}) is not walkable",
            )

        start: Pos = (start_x, start_y)
        goal: Pos = (goal_x, goal_y)

        if start == goal:
            path = Path()
            path.append(start_x, start_y)
            return PathResult.success(path)

        estimate = self._make_estimate(grid, goal)

        # open set: (f, h, counter, g, (x, y)); ties go to lower h, then FIFO
        open_heap: List[Tuple[float, float, int, float, Pos]] = []
        counter = 0
        h0 = estimate(start)
        heappush(open_heap, (h0, h0, counter, 0.0, start))

        g_cost: Dict[Pos, float] = {start: 0.0}
        parent: Dict[Pos, Pos] = {}
        budget_hit = False

        while open_heap:
            _, _, _, g_cur, cur = heappop(open_heap)

            if g_cur > g_cost[cur]:
                # superseded by a cheaper push
                continue

            if self.max_iterations and self.last_nodes_explored >= self.max_iterations:
                budget_hit = True
                break

            self.last_nodes_explored += 1

            if cur == goal:
                return PathResult.success(self._reconstruct(parent, goal, g_cur))

            cx, cy = cur
            for np in grid.neighbors(cx, cy):
                nx, ny = np
                step = grid.get_cell_cost(nx, ny)
                if nx != cx and ny != cy:
                    step *= DIAGONAL_COST
                new_g = g_cur + step

                if new_g < g_cost.get(np, inf):
                    g_cost[np] = new_g
                    parent[np] = cur
                    h = estimate(np)
                    counter += 1
                    heappush(open_heap, (new_g + h, h, counter, new_g, np))

        if budget_hit:
            logger.debug("Pathfinding exceeded max iterations ({})", self.max_iterations)
            return PathResult.failure(
                PathfindingErrorKind.NO_PATH,
                f"No path found from ({start_x}, {start_y}) to ({goal_x}, {goal_y}) "
                f"within {self.max_iterations} expanded nodes",
            )
        return PathResult.failure(
            PathfindingErrorKind.NO_PATH,
            f"No path found from ({start_x}, {start_y}) to ({goal_x}, {goal_y})",
        )

    def _make_estimate(self, grid: NavGrid, goal: Pos) -> Callable[[Pos], float]:
        gx, gy = goal

        if self._heuristic is None:
            base = octile if grid.allow_diagonal else manhattan
            scale = grid.walkable_cost_floor()

            def estimate(p: Pos) -> float:
                return scale * base(p[0], p[1], gx, gy)

            return estimate

        heuristic = self._heuristic
        context = self._context

        def estimate(p: Pos) -> float:
            return heuristic(p[0], p[1], gx, gy, context)

        return estimate

    def _reconstruct(self, parent: Dict[Pos, Pos], goal: Pos, cost: float) -> Path:
        path = Path()
        cur = goal
        path.append(*cur)
        while cur in parent:
            cur = parent[cur]
            path.append(*cur)
        path.reverse()
        path.set_total_cost(cost)

        if self.smoothing is SmoothingMode.SIMPLE:
            smooth_simple(path)
        return path
