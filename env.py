# env.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Set

import numpy as np
from loguru import logger

from config import Config
from navgrid import NavGrid, Pos


@dataclass
class World:
    """A generated grid together with the query to run on it."""
    grid: NavGrid
    start: Pos
    goal: Pos
    attempts: int = 1


def reachable_cells(grid: NavGrid, origin: Pos) -> Set[Pos]:
    """
    Flood fill from origin under the grid's movement policy.
    Returns an empty set when origin itself is not walkable.
    """
    if not grid.is_walkable(*origin):
        return set()

    visited: Set[Pos] = {origin}
    q = deque([origin])
    while q:
        x, y = q.popleft()
        for nb in grid.neighbors(x, y):
            if nb in visited:
                continue
            visited.add(nb)
            q.append(nb)
    return visited


def build_world(cfg: Config) -> World:
    """
    Generate a random grid from cfg and pick a start/goal pair that is
    connected.

      - obstacles: each cell blocked with probability obstacle_density
      - costs: 1.0 + U[0, cost_jitter) per cell
      - resampled until the region around a random free cell covers at
        least min_connected_ratio of all free cells
      - start and goal: two distinct cells of that region
    """
    rng = np.random.default_rng(cfg.seed)
    shape = (cfg.height, cfg.width)

    for attempt in range(1, cfg.max_obstacle_tries + 1):
        blocked = rng.random(shape) < cfg.obstacle_density
        costs = 1.0 + rng.random(shape) * cfg.cost_jitter

        grid = NavGrid.from_arrays(costs, blocked)
        grid.set_allow_diagonal(cfg.allow_diagonal)
        grid.set_cut_corners(cfg.cut_corners)

        free: List[Pos] = [
            (int(x), int(y)) for y, x in zip(*np.nonzero(~blocked))
        ]
        if len(free) < 2:
            continue

        origin = free[int(rng.integers(len(free)))]
        region = reachable_cells(grid, origin)
        ratio = len(region) / len(free)

        if len(region) >= 2 and ratio >= cfg.min_connected_ratio:
            break
        logger.debug(
            "World attempt {} rejected: region {} / {} free cells",
            attempt, len(region), len(free),
        )
    else:
        raise RuntimeError(
            f"Failed to generate a connected world after {cfg.max_obstacle_tries} attempts."
        )

    candidates = sorted(region)
    i, j = rng.choice(len(candidates), size=2, replace=False)
    start, goal = candidates[int(i)], candidates[int(j)]

    logger.debug(
        "Built {}x{} world (seed={}, attempts={}): start={} goal={}",
        cfg.width, cfg.height, cfg.seed, attempt, start, goal,
    )
    return World(grid=grid, start=start, goal=goal, attempts=attempt)
