from typing import Any, Dict

from loguru import logger

from config import Config
from env import build_world
from io_utils import configure_logging, make_run_dir, save_config, save_summary
from navgrid import Pathfinder, SmoothingMode


def run_experiment(cfg: Config) -> Dict[str, Any]:
    """
    Build the world described by cfg, run one search on it and return a
    nested summary dict (grid, query, search result, timing).
    """
    world = build_world(cfg)
    grid = world.grid

    pf = Pathfinder(
        grid,
        heuristic=cfg.heuristic,
        smoothing=SmoothingMode(cfg.smoothing),
        max_iterations=cfg.max_iterations,
    )
    pf.reset_stats()

    (sx, sy), (gx, gy) = world.start, world.goal
    result = pf.find_path(sx, sy, gx, gy)

    blocked = int(grid.blocked_mask().sum())
    summary: Dict[str, Any] = {
        "grid": {
            "width": grid.width,
            "height": grid.height,
            "blocked_cells": blocked,
            "allow_diagonal": grid.allow_diagonal,
            "cut_corners": grid.cut_corners,
            "generation_attempts": world.attempts,
        },
        "query": {"start": list(world.start), "goal": list(world.goal)},
        "search": {
            "heuristic": cfg.heuristic or "default",
            "found": result.ok,
            "error": None if result.ok else result.kind.name,
            "nodes_explored": pf.get_last_nodes_explored(),
            "path_points": result.path.get_length() if result.ok else 0,
            "total_cost": result.path.total_cost if result.ok else None,
            "runtime": pf.last_runtime,
        },
    }
    return summary


def main() -> None:
    """
    Single-run entry point.

    Typical usage:
      1. Edit the Config defaults in config.py (grid size, density,
         heuristic, seed, ...).
      2. Run:
             python main.py
      3. Inspect outputs/<run>/config.json and summary.json.
    """
    cfg = Config()
    configure_logging(cfg.log_level)

    run_dir = make_run_dir(cfg, base="outputs")
    save_config(cfg, run_dir)

    summary = run_experiment(cfg)
    save_summary(summary, run_dir)

    search = summary["search"]
    logger.info("Run directory: {}", run_dir)
    if search["found"]:
        logger.info(
            "Path: {} points, cost {:.3f}, {} nodes explored",
            search["path_points"],
            search["total_cost"],
            search["nodes_explored"],
        )
    else:
        logger.warning(
            "No path ({}) after {} nodes explored",
            search["error"],
            search["nodes_explored"],
        )


if __name__ == "__main__":
    main()
