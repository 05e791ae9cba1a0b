"""
Oracle for collection equality.

We use `collections.Counter` equality as the ground-truth oracle:
- Counts every element, so duplicates are never collapsed
- Independent of element order
- Implemented in the standard library, separately from our own counting code

Public API (stable):
    oracle_equal(a: Collection, b: Collection) -> bool

Conventions:
- The oracle never mutates its inputs.
- Every comparator in this repo that claims correctness must agree with the oracle.
- Like Counter itself, the oracle requires hashable elements.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Collection

ORACLE_NAME: str = "python_collections_counter"

__all__ = ["ORACLE_NAME", "oracle_equal"]


def oracle_equal(a: Collection[Any], b: Collection[Any]) -> bool:
    """
    Return the ground-truth answer to "do `a` and `b` hold the same multiset?".

    Parameters
    ----------
    a : Collection
        First collection. Not mutated.
    b : Collection
        Second collection. Not mutated.

    Returns
    -------
    bool
        True iff every element occurs equally often in `a` and `b`.
    """
    # The length check is redundant for correctness but skips counting on mismatch.
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)
