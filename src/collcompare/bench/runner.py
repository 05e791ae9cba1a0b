"""
Experiment runner: orchestrates a full comparator benchmarking sweep from a YAML config.

Usage (from repo root):
    python -m collcompare.bench.runner experiments/configs/02_permutation_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per successful timing sample
    - summary.csv             # median + IQR per (algo, n), plus oracle agreement
    - (console) rich/tqdm summaries

Design notes:
- For each size n, we generate ONE pair (a, b) and give the same pair to every comparator.
- The oracle answer is computed once per pair; every sample records whether the
  comparator agreed with it. Naive comparators are expected to disagree on some relations.
- Harness handles warmup/GC; we keep timing clean.
- On timeout/error for a comparator at size n, we skip larger sizes for that comparator.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from collcompare.bench.measure import time_compare_call
from collcompare.datasets import make_pair
from collcompare.validate import ORACLE_NAME, oracle_equal

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "correct"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    label: str
    name: str
    compare_fn: Callable[..., bool]
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "oracle": ORACLE_NAME,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    """
    Load each comparator module from `collcompare.algorithms`.

    An entry may carry a `label` so the same module can appear twice with
    different configs (e.g. two containment variants). Labels must be unique.
    """
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        label = entry.get("label", name)
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)

        try:
            mod = importlib.import_module(f"collcompare.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import comparator module 'collcompare.algorithms.{name}': {e!r}") from e

        if not callable(getattr(mod, "compare", None)):
            raise AttributeError(f"Comparator module '{name}' must define a callable `compare(a, b, *, config=None)`")

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Algorithm '{label}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(label=label, name=name, compare_fn=mod.compare, config=config))
    return specs


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    # Only successful samples carry time_ns
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df.astype({"time_ns": "int64", "correct": "bool"})

    grouped = df.groupby(["algo", "n"])
    agg = grouped.agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
        correct=("correct", "all"),
    )
    quartiles = grouped["time_ns"].quantile([0.25, 0.75]).unstack()
    agg["iqr_ns"] = quartiles[0.75] - quartiles[0.25]

    out = agg.reset_index()
    out[["median_ns", "min_ns", "max_ns", "iqr_ns"]] = out[["median_ns", "min_ns", "max_ns", "iqr_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int], correct: bool) -> str:
    if median_ns is None:
        return "—"
    # ms for display; a trailing "!" marks disagreement with the oracle
    cell = f"{median_ns / 1e6:.3f} ± {(iqr_ns or 0) / 1e6:.3f}"
    return cell if correct else f"[red]{cell} ![/]"


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms, ! = wrong answer)")
    table.add_column("Comparator", style="bold")
    picks: List[Tuple[str, int]] = []
    if sizes:
        for npick in sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]}):
            picks.append((f"n={npick}", npick))
    for hdr, _ in picks:
        table.add_column(hdr, justify="right")

    for algo in summary["algo"].unique():
        row = [str(algo)]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                row.append(
                    _format_cell(
                        int(s["median_ns"].values[0]),
                        int(s["iqr_ns"].values[0]),
                        bool(s["correct"].values[0]),
                    )
                )
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name: str = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats: int = int(cfg["repeats"])
    warmup: bool = bool(cfg["warmup"])
    disable_gc: bool = bool(cfg["disable_gc"])
    timeout_seconds: float = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    algos_cfg: List[Dict[str, Any]] = list(cfg["algorithms"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if not algos_cfg:
        raise ValueError("Config 'algorithms' must list at least one comparator")

    # Resolve comparators before touching the filesystem
    algos: List[AlgoSpec] = _resolve_algorithms(algos_cfg)

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))

    # Per-comparator skip flags (set on timeout/error)
    per_algo_skip = {s.label: False for s in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Comparators:[/bold] {', '.join(s.label for s in algos)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        a, b = make_pair(n, dataset_spec, rng)
        expected = oracle_equal(a, b)

        for spec in algos:
            if per_algo_skip[spec.label]:
                continue

            res = time_compare_call(
                algo_name=spec.label,
                algo_fn=spec.compare_fn,
                a=a,
                b=b,
                config=spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                defensive_copy=True,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": spec.label,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "result": res["result"],
                        "expected": expected,
                        "correct": res["result"] == expected,
                        "config": spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status in ("timeout", "error"):
                per_algo_skip[spec.label] = True
                _append_jsonl(
                    {
                        "algo": spec.label,
                        "n": n,
                        "status": status,
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "error": res["error"],
                        "config": spec.config,
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_rich_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {p}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a collection-comparison benchmark from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
