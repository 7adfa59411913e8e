"""Tests for the experiment drivers: run summary, I/O helpers and batch plumbing."""

from __future__ import annotations

import json

import pytest

from batch_run import flatten_dict, iter_param_combinations, run_one
from config import Config
from io_utils import make_run_dir, save_config, save_summary
from main import run_experiment


def test_run_experiment_summary_shape():
    summary = run_experiment(Config(width=12, height=12, seed=2))

    search = summary["search"]
    assert search["found"] is True
    assert search["error"] is None
    assert search["nodes_explored"] >= 1
    assert search["path_points"] >= 2
    assert search["total_cost"] > 0
    assert summary["grid"]["width"] == 12
    assert summary["search"]["heuristic"] == "default"


def test_run_experiment_reports_budget_failure():
    summary = run_experiment(Config(width=30, height=30, obstacle_density=0.0,
                                    max_iterations=1, seed=4))
    assert summary["search"]["found"] is False
    assert summary["search"]["error"] == "NO_PATH"
    assert summary["search"]["total_cost"] is None


def test_flatten_dict():
    assert flatten_dict({"a": {"b": 1, "c": {"d": 2}}, "e": 3}) == {
        "a.b": 1,
        "a.c.d": 2,
        "e": 3,
    }


def test_iter_param_combinations_is_cartesian():
    combos = list(iter_param_combinations({"x": [1, 2], "y": ["a", "b", "c"]}))
    assert len(combos) == 6
    assert {"x": 2, "y": "c"} in combos


def test_run_one_merges_params_and_metrics():
    params = {"purpose": "unit", "width": 10, "height": 10, "heuristic": "octile", "seed": 1}
    row = run_one(params)

    assert row["purpose"] == "unit"
    assert row["heuristic"] == "octile"
    assert row["search.heuristic"] == "octile"
    assert "search.nodes_explored" in row


def test_run_one_returns_none_on_bad_config():
    assert run_one({"purpose": "unit", "heuristic": "dijkstra"}) is None


def test_run_dir_and_json_files(tmp_path):
    cfg = Config(seed=3, heuristic="euclidean")
    run_dir = make_run_dir(cfg, base=str(tmp_path / "outputs"))

    assert run_dir.is_dir()
    assert "Heuclidean" in run_dir.name
    assert "seed3" in run_dir.name

    save_config(cfg, run_dir)
    save_summary({"search": {"found": True}}, run_dir)

    saved_cfg = json.loads((run_dir / "config.json").read_text(encoding="utf-8"))
    assert saved_cfg["seed"] == 3
    assert saved_cfg["heuristic"] == "euclidean"
    assert json.loads((run_dir / "summary.json").read_text(encoding="utf-8")) == {
        "search": {"found": True}
    }


def test_run_dirs_are_unique(tmp_path):
    cfg = Config()
    a = make_run_dir(cfg, base=str(tmp_path))
    b = make_run_dir(cfg, base=str(tmp_path))
    assert a != b


@pytest.mark.parametrize("smoothing", ["none", "simple"])
def test_run_experiment_with_smoothing(smoothing):
    summary = run_experiment(Config(seed=5, smoothing=smoothing))
    assert summary["search"]["found"] is True
