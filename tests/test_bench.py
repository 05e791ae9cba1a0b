"""
Tests for the timing harness and the experiment runner.

The runner test executes a tiny sweep into pytest's tmp_path and checks the
files it writes; timings themselves are not asserted.
"""

from __future__ import annotations

import json
import pathlib
import sys

import pandas as pd
import pytest
import yaml

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from collcompare.algorithms import counting
from collcompare.bench import time_compare_call
from collcompare.bench.runner import _resolve_algorithms, run_experiment


def _time(algo_fn, a, b, **overrides):
    kwargs = dict(
        algo_name="x",
        algo_fn=algo_fn,
        a=a,
        b=b,
        config=None,
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
        defensive_copy=True,
    )
    kwargs.update(overrides)
    return time_compare_call(**kwargs)


# ------------------------- measure ------------------------- #

def test_time_compare_call_ok() -> None:
    res = _time(counting.compare, [1, 2, 2], [2, 1, 2])
    assert res["status"] == "ok"
    assert res["result"] is True
    assert len(res["samples_ns"]) == 3
    assert all(t >= 0 for t in res["samples_ns"])


def test_time_compare_call_records_false_answer() -> None:
    res = _time(counting.compare, [1, 1], [1, 2], warmup=False)
    assert res["result"] is False


def test_time_compare_call_error_on_warmup() -> None:
    def broken(a, b, *, config=None):
        raise RuntimeError("boom")

    res = _time(broken, [1], [1])
    assert res["status"] == "error"
    assert "warmup failed" in res["error"]
    assert res["samples_ns"] == []


def test_time_compare_call_error_in_timed_loop() -> None:
    def broken(a, b, *, config=None):
        raise RuntimeError("boom")

    res = _time(broken, [1], [1], warmup=False)
    assert res["status"] == "error"
    assert "repeat 0" in res["error"]


def test_time_compare_call_timeout() -> None:
    res = _time(counting.compare, [1], [1], warmup=False, timeout_seconds=1e-12)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_time_compare_call_restores_gc() -> None:
    import gc

    assert gc.isenabled()
    _time(counting.compare, [1], [1])
    assert gc.isenabled()


@pytest.mark.parametrize("overrides", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_time_compare_call_rejects_bad_arguments(overrides) -> None:
    with pytest.raises(ValueError):
        _time(counting.compare, [1], [1], **overrides)


# ------------------------- runner ------------------------- #

def test_resolve_algorithms_rejects_duplicate_labels() -> None:
    with pytest.raises(ValueError, match="Duplicate algorithm label"):
        _resolve_algorithms([{"name": "counting"}, {"name": "counting"}])


def test_resolve_algorithms_rejects_unknown_module() -> None:
    with pytest.raises(ImportError):
        _resolve_algorithms([{"name": "bogosort"}])


def test_resolve_algorithms_allows_labelled_variants() -> None:
    specs = _resolve_algorithms(
        [
            {"name": "containment", "label": "mutual", "config": {"variant": "mutual"}},
            {"name": "containment", "label": "sized", "config": {"variant": "sized_mutual"}},
        ]
    )
    assert [s.label for s in specs] == ["mutual", "sized"]
    assert specs[0].config == {"variant": "mutual"}


def _write_config(tmp_path: pathlib.Path, **overrides) -> pathlib.Path:
    cfg = {
        "experiment_name": "tiny",
        "output_dir": str(tmp_path / "runs"),
        "seed": 7,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 5.0,
        "dataset": {
            "dist": "few_uniques",
            "params": {"k": 4, "range": [0, 50]},
            "relation": "duplicate_mismatch",
        },
        "sizes": [10, 20],
        "algorithms": [
            {"name": "counting"},
            {"name": "containment", "label": "naive", "config": {"variant": "sized_mutual"}},
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path: pathlib.Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))

    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists(), name

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert meta["oracle"] == "python_collections_counter"

    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()]
    assert len(lines) == 2 * 2 * 2  # algos * sizes * repeats
    assert all(l["expected"] is False for l in lines)
    assert all(l["correct"] for l in lines if l["algo"] == "counting")
    # The naive check is fooled by a pure multiplicity mismatch
    assert not any(l["correct"] for l in lines if l["algo"] == "naive")

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == {"counting", "naive"}
    assert sorted(summary["n"].unique().tolist()) == [10, 20]
    assert (summary["samples_ok"] == 2).all()
    assert summary.set_index(["algo", "n"])["correct"].to_dict() == {
        ("counting", 10): True,
        ("counting", 20): True,
        ("naive", 10): False,
        ("naive", 20): False,
    }


def test_run_experiment_missing_keys(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path)


def test_run_experiment_rejects_empty_sizes(tmp_path: pathlib.Path) -> None:
    with pytest.raises(ValueError, match="sizes"):
        run_experiment(_write_config(tmp_path, sizes=[]))


def test_every_available_comparator_resolves() -> None:
    from collcompare.algorithms import AVAILABLE

    specs = _resolve_algorithms([{"name": name} for name in AVAILABLE])
    for spec in specs:
        assert spec.compare_fn([2, 1], [1, 2], config=spec.config) is True


def test_main_runs_config(tmp_path: pathlib.Path) -> None:
    from collcompare.bench.runner import main

    main([str(_write_config(tmp_path, sizes=[5]))])
    runs = list((tmp_path / "runs").iterdir())
    assert len(runs) == 1
    assert (runs[0] / "summary.csv").exists()


def test_main_missing_config(tmp_path: pathlib.Path) -> None:
    from collcompare.bench.runner import main

    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])


def test_usage_line_names_a_shipped_config() -> None:
    import re

    from collcompare.bench import runner

    paths = re.findall(r"experiments/configs/\S+\.yaml", runner.__doc__)
    assert paths
    for rel in paths:
        cfg = yaml.safe_load((_REPO_ROOT / rel).read_text(encoding="utf-8"))
        assert cfg["experiment_name"]
