# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
import sys
from typing import Any
import uuid

from loguru import logger

from config import Config


def configure_logging(level: str = "INFO") -> None:
    """
    Route loguru output to stderr at the given level.

    Library modules (navgrid, env) only emit records; the driver scripts
    call this once at startup. Safe to call repeatedly.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level: <7}</level>| <dim><cyan>{file}:{line}</cyan></dim> | <level>{message}</level>",
        level=level.upper(),
    )


def make_run_dir(cfg: Config, base: str = "outputs") -> Path:
    """
    Create and return a unique directory for this run.

    The folder name encodes grid size, obstacle density, heuristic and
    seed, plus a timestamp and short UUID so repeated runs with the same
    config do not overwrite each other:

        outputs/run_G20x20_D0.20_Hdefault_seed1_20251216-213012-ab12cd34/
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    parts = [
        f"G{cfg.width}x{cfg.height}",
        f"D{cfg.obstacle_density:.2f}",
        f"H{cfg.heuristic or 'default'}",
        f"seed{cfg.seed}",
    ]
    base_name = "run_" + "_".join(parts)

    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]

    run_dir = base_path / f"{base_name}_{ts}-{uid}"
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """Write the Config used for this run as JSON, for reproducibility."""
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Write the run's metrics as JSON.

    The structure is nested ("search.nodes_explored", "grid.width", ...)
    so batch_run.flatten_dict can turn it into CSV columns.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
