"""
Timing harness for collection comparators.

We measure exactly one call to a comparator's `compare(a, b, config=...)` per
sample, using a monotonic high-resolution clock. All non-essential work
(copying, GC, warmup) happens outside the timed block to keep measurements clean.

Public API (stable):
    time_compare_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
        "result": bool | None,              # answer from the last completed call
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["time_compare_call"]


def time_compare_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., bool],
    a: List[Any],
    b: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, b, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the comparator (for logs/records).
    algo_fn : Callable[..., bool]
        Callable implementing compare(a, b, *, config: dict | None) -> bool.
    a, b : list
        The collections to compare. The comparator must not mutate them.
    config : dict | None
        Comparator configuration passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample timeout threshold. If a single call exceeds it, we mark
        status="timeout" and stop further sampling.
    defensive_copy : bool
        If True, copy both inputs outside each timed call and pass the copies.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    samples: List[int] = []
    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": samples,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "result": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            wa, wb = (list(a), list(b)) if defensive_copy else (a, b)
            algo_fn(wa, wb, config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        # ---- Timed loop ----
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            try:
                # Prepare inputs OUTSIDE the timed block
                arg_a, arg_b = (list(a), list(b)) if defensive_copy else (a, b)

                t0 = time.perf_counter_ns()
                out = algo_fn(arg_a, arg_b, config=config)
                t1 = time.perf_counter_ns()

                elapsed = t1 - t0
                samples.append(int(elapsed))
                result["result"] = bool(out)

                if elapsed > threshold_ns:
                    result["status"] = "timeout"
                    result["timed_out_on_repeat"] = r
                    break

            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

    finally:
        # Restore GC only if we turned it off; respect a caller that had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
