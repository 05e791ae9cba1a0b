"""
Collection-pair generators for comparison benchmarks.

A pair is built in two steps: draw the base collection `a` from a value
distribution, then derive `b` from `a` according to a relation. The relation
fixes the expected answer, so every comparator can be checked as it is timed.

Value distributions (spec["dist"]):
- "random":
    Integers drawn uniformly from an inclusive range (params["range"], required).
- "few_uniques":
    Choose up to k distinct integer values (uniform over an optional inclusive
    range), then fill `a` by sampling among them. Produces many duplicates.
- "small_range":
    Like "random" over a small domain, [0, 255] inclusive by default.

Relations (spec["relation"], default "permutation"):
- "identical":          b is a copy of a                         -> equal
- "permutation":        b is a shuffled copy of a                -> equal
- "duplicate_mismatch": shuffled a with one occurrence of a value
                        swapped for another value already in a   -> not equal, same length
- "superset":           shuffled a plus one extra element        -> not equal
- "replaced":           shuffled a with one element replaced by a
                        value absent from a                      -> not equal, same length

Public API (stable):
    make_pair(n: int, spec: dict, rng: numpy.random.Generator) -> tuple[list[int], list[int]]
    expected_equal(relation: str) -> bool

Conventions:
- `a` always has length n. `b` has length n, except n + 1 for "superset".
- Returns Python lists of ints (comparators stay NumPy-agnostic).
- The caller supplies the RNG (seeded upstream) for reproducibility.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "few_uniques",
    "small_range",
}
SUPPORTED_RELATIONS = {
    "identical",
    "permutation",
    "duplicate_mismatch",
    "superset",
    "replaced",
}
_EQUAL_RELATIONS = {"identical", "permutation"}

__all__ = ["SUPPORTED_DISTS", "SUPPORTED_RELATIONS", "make_pair", "expected_equal"]


def make_pair(
    n: int, spec: Dict[str, Any], rng: np.random.Generator
) -> Tuple[List[int], List[int]]:
    """
    Generate a collection pair `(a, b)` according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Length of `a`. Must be >= 0.
    spec : dict
        Pair specification, e.g.

            {
                "dist": "few_uniques",
                "params": {"k": 16, "range": [0, 1000]},
                "relation": "duplicate_mismatch"
            }

    rng : numpy.random.Generator
        Random number generator owned by the caller.

    Returns
    -------
    (list[int], list[int])

    Raises
    ------
    ValueError
        If inputs are invalid, the distribution or relation is unsupported, or
        the relation cannot be realised for this `a` (e.g. "duplicate_mismatch"
        needs at least two distinct values).
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    relation = spec.get("relation", "permutation")
    if relation not in SUPPORTED_RELATIONS:
        raise ValueError(
            f"Unsupported relation: {relation!r}. Supported: {sorted(SUPPORTED_RELATIONS)}"
        )

    params = spec.get("params", {}) or {}
    a = _make_base(n, dist, params, rng)
    b = _derive(a, relation, rng)
    return a, b


def expected_equal(relation: str) -> bool:
    """Return the answer a correct comparator must give for pairs of this relation."""
    if relation not in SUPPORTED_RELATIONS:
        raise ValueError(
            f"Unsupported relation: {relation!r}. Supported: {sorted(SUPPORTED_RELATIONS)}"
        )
    return relation in _EQUAL_RELATIONS


# ------------------------- base distributions ------------------------- #


def _make_base(
    n: int, dist: str, params: Dict[str, Any], rng: np.random.Generator
) -> List[int]:
    if n == 0:
        return []

    if dist == "random":
        lo, hi = _parse_inclusive_range(params)
        # np.random.Generator.integers is half-open [low, high); +1 makes it inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_optional_inclusive_range(params, default=(0, 4294967295))
        actual_k = int(min(k, n, hi - lo + 1))
        # Draw until we hold `actual_k` unique values, keeping determinism tied to `rng`.
        chosen: List[int] = []
        seen = set()
        while len(chosen) < actual_k:
            need = actual_k - len(chosen)
            for v in map(int, rng.integers(lo, hi + 1, size=need * 2)):
                if v not in seen:
                    seen.add(v)
                    chosen.append(v)
                    if len(chosen) == actual_k:
                        break
        idxs = rng.integers(0, actual_k, size=n)
        return [chosen[int(t)] for t in idxs]

    # small_range
    lo, hi = _parse_optional_inclusive_range(params, default=(0, 255))
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


# ------------------------- relations ------------------------- #


def _derive(a: List[int], relation: str, rng: np.random.Generator) -> List[int]:
    if relation == "identical":
        return list(a)

    b = [a[int(i)] for i in rng.permutation(len(a))]

    if relation == "permutation":
        return b

    if relation == "superset":
        # Extra copy of an existing value keeps b a multiset superset of a.
        extra = b[int(rng.integers(0, len(b)))] if b else 0
        b.append(extra)
        return b

    if relation == "replaced":
        if not b:
            raise ValueError("relation 'replaced' needs n >= 1")
        b[int(rng.integers(0, len(b)))] = max(a) + 1
        return b

    # duplicate_mismatch
    counts = Counter(a)
    distinct = sorted(counts)
    if len(distinct) < 2:
        raise ValueError("relation 'duplicate_mismatch' needs at least two distinct values")
    # Prefer taking from a repeated value so both sides keep the same distinct set.
    repeated = [v for v in distinct if counts[v] >= 2]
    sources = repeated or distinct
    src = sources[int(rng.integers(0, len(sources)))]
    targets = [v for v in distinct if v != src]
    dst = targets[int(rng.integers(0, len(targets)))]
    b[b.index(src)] = dst
    return b


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_inclusive_range(params: Dict[str, Any]) -> Tuple[int, int]:
    """
    Validate and parse the inclusive integer range from params (REQUIRED).

    Expected:
        params["range"] == [min_int, max_int]  (both inclusive)
    """
    if "range" not in params:
        raise ValueError(
            "random.params.range must be provided as [min, max] (inclusive)"
        )
    return _parse_optional_inclusive_range(params, default=(0, 0))


def _parse_optional_inclusive_range(
    params: Dict[str, Any], default: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Parse an optional inclusive integer range from params.
    If not present, return `default`.
    """
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_k(params: Dict[str, Any]) -> int:
    """
    Parse and validate k (desired #unique values) for few_uniques.
    Must be an integer >= 1.
    """
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return k


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer))
