# batch_config.py
from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use at most this many worker processes.
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID runs all permutations (Cartesian product) of the values.
# Each key is a Config field, plus the free-text "purpose" label.
#
# Experiment count is prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["heuristic_comparison"],  # free-text label for this batch

    # --- world parameters ---
    "width": [20, 40],                 # grid columns
    "height": [20, 40],                # grid rows
    "obstacle_density": [0.1, 0.25],   # fraction of blocked cells
    "cost_jitter": [0.0, 2.0],         # extra terrain cost per cell, U[0, jitter)
    "allow_diagonal": [True, False],   # 8- vs 4-connected movement

    # --- search ---
    # None = octile on 8-connected grids, manhattan on 4-connected ones
    "heuristic": [None, "manhattan", "euclidean", "chebyshev", "octile"],

    # --- randomness ---
    "seed": [i for i in range(10)],
}

# Heuristics (see navgrid/heuristics.py):
#
#   "manhattan"  - |dx| + |dy|; admissible only without diagonal moves.
#   "euclidean"  - straight-line distance; admissible on unit-cost grids.
#   "chebyshev"  - max(|dx|, |dy|); admissible, loose with sqrt(2) diagonals.
#   "octile"     - exact on an empty 8-connected unit-cost grid.
