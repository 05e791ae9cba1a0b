"""
Equality-only comparator.

Matches each element of `a` against a working copy of `b` with `==` and
removes the first match. No hashing is involved, so this also works for
unhashable elements, and for types whose hash is stricter than their equality.
Cost is O(|a| * |b|).
"""

from __future__ import annotations

from typing import Any, Collection, Dict, Optional

__all__ = ["compare"]


def compare(
    a: Collection[Any], b: Collection[Any], *, config: Optional[Dict[str, Any]] = None
) -> bool:
    remaining = list(b)
    if len(a) != len(remaining):
        return False

    for x in a:
        for i, y in enumerate(remaining):
            if x == y:
                del remaining[i]
                break
        else:
            # Nothing left in b matches x
            return False

    return True
