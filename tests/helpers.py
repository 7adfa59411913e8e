"""Reference Dijkstra search and seeded grid builders for the test suite."""

from __future__ import annotations

import heapq
import math

import numpy as np

from navgrid import NavGrid

_CARDINAL = [(0, -1), (1, 0), (0, 1), (-1, 0)]
_DIAGONAL = [(1, -1), (1, 1), (-1, 1), (-1, -1)]


def dijkstra_cost(grid: NavGrid, start, goal) -> float:
    """Cheapest start->goal cost under the grid's movement rules, inf if unreachable.

    Written against NavCell data directly (not NavGrid.neighbors) so it
    checks the planner's edge rules as well as its search.
    """
    def walkable(x, y):
        cell = grid.get_cell(x, y)
        return cell is not None and cell.is_walkable()

    def edges(x, y):
        for dx, dy in _CARDINAL:
            if walkable(x + dx, y + dy):
                yield (x + dx, y + dy), grid.get_cell(x + dx, y + dy).cost
        if not grid.allow_diagonal:
            return
        for dx, dy in _DIAGONAL:
            if not walkable(x + dx, y + dy):
                continue
            if not grid.cut_corners and not (walkable(x + dx, y) or walkable(x, y + dy)):
                continue
            yield (x + dx, y + dy), grid.get_cell(x + dx, y + dy).cost * math.sqrt(2.0)

    dist = {start: 0.0}
    heap = [(0.0, start)]
    while heap:
        d, cur = heapq.heappop(heap)
        if cur == goal:
            return d
        if d > dist[cur]:
            continue
        for nxt, w in edges(*cur):
            nd = d + w
            if nd < dist.get(nxt, math.inf):
                dist[nxt] = nd
                heapq.heappush(heap, (nd, nxt))
    return math.inf


def random_grid(seed: int, width: int = 8, height: int = 8, density: float = 0.25,
                cost_low: float = 1.0, cost_high: float = 4.0) -> NavGrid:
    """Small seeded grid with random obstacles and terrain costs."""
    rng = np.random.default_rng(seed)
    costs = rng.uniform(cost_low, cost_high, size=(height, width))
    blocked = rng.random((height, width)) < density
    blocked[0, 0] = False
    blocked[height - 1, width - 1] = False
    return NavGrid.from_arrays(costs, blocked)


