"""
Order-independent, duplicate-aware collection equality.

Two collections are equal when every distinct element occurs the same number
of times in both, regardless of order. Elements are compared with `==` and
looked up by `hash()`, so equal elements must hash identically (the usual
Python contract). A caller-supplied `key` replaces both: elements x and y are
then considered equal iff key(x) == key(y).

Public API (stable):
    is_equal_collection(a, b, *, key=None) -> bool
    NullCollectionError

Conventions:
- Neither input is mutated.
- The result is symmetric: is_equal_collection(a, b) == is_equal_collection(b, a).
- Passing None for either collection raises NullCollectionError; None is never
  treated as an empty collection.
- An iterable without len() (e.g. a generator) is consumed once into a list.

Why not a one-liner? `all(x in a for x in b)` and friends collapse duplicates:
[x, x, y] and [x, y, y] have the same size and each contains every element of
the other, yet they are different multisets. Counting is also O(|a| + |b|)
instead of the O(|a| * |b|) of pairwise containment.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Callable, Dict, Hashable, Iterable, Optional

__all__ = ["NullCollectionError", "is_equal_collection"]


class NullCollectionError(TypeError):
    """Raised when None is passed where a collection is required."""

    def __init__(self, name: str) -> None:
        super().__init__(f"collection argument {name!r} must not be None")
        self.name = name


def is_equal_collection(
    a: Iterable[Any],
    b: Iterable[Any],
    *,
    key: Optional[Callable[[Any], Hashable]] = None,
) -> bool:
    """
    Return True iff `a` and `b` contain the same elements with the same multiplicities.

    Parameters
    ----------
    a, b : iterable
        The collections to compare. Order is ignored, duplicates are not.
    key : callable, optional
        Maps each element to the hashable value it is compared by.
        Defaults to the element itself.

    Returns
    -------
    bool

    Raises
    ------
    NullCollectionError
        If `a` or `b` is None.
    TypeError
        If an element (or its key) is unhashable.
    """
    same = b is a
    a = _as_sized(a, "a")
    # One iterator passed twice is read once; b shares the materialized list.
    b = a if same else _as_sized(b, "b")

    if len(a) != len(b):
        return False

    counts: Dict[Hashable, int] = {}
    for x in a:
        k = x if key is None else key(x)
        counts[k] = counts.get(k, 0) + 1

    for x in b:
        k = x if key is None else key(x)
        remaining = counts.get(k, 0)
        if remaining == 0:
            # Absent from a, or b already holds more copies than a.
            return False
        counts[k] = remaining - 1

    # Equal sizes and no count went below zero: every count is back at zero.
    return True


def _as_sized(coll: Iterable[Any], name: str) -> Any:
    if coll is None:
        raise NullCollectionError(name)
    if isinstance(coll, Sized):
        return coll
    return list(coll)
