#!/usr/bin/env python3
"""
Batch experiment runner.

Sweeps PARAM_GRID from batch_config.py, runs one search per combination
(same core logic as main.py, without the per-run output folder) and
collects the flattened metrics into a single CSV file.

High-level behavior
-------------------

1. Expand PARAM_GRID into its Cartesian product.
2. For each combination: build Config + world, run the Pathfinder,
   flatten the summary dict into one row.
3. Use multiprocessing to parallelize runs across CPU cores.
4. Append rows to `outputs_batch/batch_results.csv`.

If the CSV already exists, its header fixes the column order and new
rows are appended with the same schema.

Usage
-----

From the repo root:

    python batch_run.py
"""

import csv
import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from loguru import logger

from batch_config import CPU_COUNT, PARAM_GRID
from config import Config
from io_utils import configure_logging
from main import run_experiment


def iter_param_combinations(grid: Dict[str, List[Any]]) -> Iterator[Dict[str, Any]]:
    """Yield dicts for each combination in the parameter grid."""
    keys = list(grid.keys())
    value_lists = [grid[k] for k in keys]
    for combo in itertools.product(*value_lists):
        yield dict(zip(keys, combo))


def flatten_dict(
    d: Dict[str, Any],
    parent_key: str = "",
    sep: str = ".",
) -> Dict[str, Any]:
    """
    Turn nested dicts into a flat dict with dotted keys:

        {"a": {"b": 1}, "c": 2}  ->  {"a.b": 1, "c": 2}
    """
    items: Dict[str, Any] = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


def run_single_experiment(purpose: str, **config_fields: Any) -> Dict[str, Any]:
    """Run ONE configuration and return its flattened metrics."""
    cfg = Config(**config_fields)
    return flatten_dict(run_experiment(cfg))


def run_one(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Worker function for each process.

    Returns the merged {params..., metrics...} row, or None if the run
    failed (the failure is logged and the batch carries on).
    """
    params = dict(params)

    try:
        metrics = run_single_experiment(**params)
    except Exception:
        logger.exception("run_single_experiment failed for params={}", params)
        return None

    return {**params, **metrics}


def main_batch() -> None:
    configure_logging("INFO")

    combos = list(iter_param_combinations(PARAM_GRID))
    total = len(combos)
    if total == 0:
        logger.warning("No parameter combinations to run. Check PARAM_GRID.")
        return

    logger.info("Total experiments to run: {}", total)

    out_dir = Path("outputs_batch")
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / "batch_results.csv"

    fieldnames: Optional[List[str]] = None
    if out_path.exists():
        logger.info("Appending to existing CSV: {}", out_path)
        with out_path.open("r", newline="") as f:
            existing_header = next(csv.reader(f), [])
        fieldnames = existing_header or None

    # Without a header yet, run the first job synchronously to infer columns.
    start_index = 0
    if fieldnames is None:
        first_row = None
        while first_row is None and start_index < total:
            first_row = run_one(combos[start_index])
            start_index += 1
        if first_row is None:
            logger.error("Every experiment failed; nothing written.")
            return

        fieldnames = sorted(first_row.keys())
        if "purpose" in fieldnames:
            fieldnames.remove("purpose")
            fieldnames = ["purpose"] + fieldnames

        with out_path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerow(first_row)
        logger.info("Created new CSV and wrote first row to {}", out_path)
    else:
        logger.info("Using existing header with {} columns.", len(fieldnames))

    remaining = combos[start_index:]
    if not remaining:
        logger.info("No remaining experiments to run; done.")
        return

    n_procs = min(CPU_COUNT or mp.cpu_count(), mp.cpu_count())
    logger.info("Running remaining {} experiments using {} processes ...", len(remaining), n_procs)

    done = start_index
    with out_path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        with mp.Pool(processes=n_procs) as pool:
            for row in pool.imap_unordered(run_one, remaining):
                done += 1
                if row is not None:
                    writer.writerow(row)
                    f.flush()
                if done % 50 == 0 or done == total:
                    logger.info("Completed {}/{} experiments", done, total)

    logger.info("All done. Results in {}", out_path)


if __name__ == "__main__":
    main_batch()
