"""
Property helpers for validating collection comparisons.

These functions provide lightweight checks you can use in tests and inside the
benchmark runner for sanity validation.

Public API (stable):
    multiplicity_diff(a: Iterable, b: Iterable) -> dict[Hashable, int]
    assert_equal_collection(a: Iterable, b: Iterable) -> None
    assert_no_mutation(before: Sequence, after: Sequence) -> None
    is_symmetric(fn: Callable, a: Collection, b: Collection) -> bool

Notes
-----
- `multiplicity_diff` needs hashable elements; it is a diagnostic, not a second
  implementation of the comparison.
- `assert_no_mutation` compares element-wise, so pass a snapshot (`list(a)`)
  taken before the call as `before`.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Collection, Dict, Hashable, Iterable, Sequence


__all__ = [
    "multiplicity_diff",
    "assert_equal_collection",
    "assert_no_mutation",
    "is_symmetric",
]


def multiplicity_diff(a: Iterable[Hashable], b: Iterable[Hashable]) -> Dict[Hashable, int]:
    """
    Return a dict of element -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Hashable, int] = {}
    for k in ca.keys() | cb.keys():
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def assert_equal_collection(a: Iterable[Hashable], b: Iterable[Hashable]) -> None:
    """
    Assert that `a` and `b` hold the same multiset.

    Raises AssertionError listing every element whose counts differ, e.g.
        Collections differ: 'x' (+1 in a), 'y' (+1 in b)
    """
    diff = multiplicity_diff(a, b)
    if not diff:
        return
    parts = []
    for k, d in sorted(diff.items(), key=lambda kv: repr(kv[0])):
        side = "a" if d > 0 else "b"
        parts.append(f"{k!r} (+{abs(d)} in {side})")
    raise AssertionError("Collections differ: " + ", ".join(parts))


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), used to ensure
    a comparator did not mutate its input in-place.

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(
                f"Input mutated at index {i}: before={x!r}, after={y!r}"
            )


def is_symmetric(
    fn: Callable[[Collection[Any], Collection[Any]], bool],
    a: Collection[Any],
    b: Collection[Any],
) -> bool:
    """Return True iff fn(a, b) == fn(b, a)."""
    return fn(a, b) == fn(b, a)
