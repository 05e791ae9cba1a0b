"""
Sort-and-compare comparator: O(n log n).

Correct only for elements with a total order consistent with `==`.
Mixed, unorderable element types raise TypeError from `sorted()`.
"""

from __future__ import annotations

from typing import Any, Collection, Dict, Optional

__all__ = ["compare"]


def compare(
    a: Collection[Any], b: Collection[Any], *, config: Optional[Dict[str, Any]] = None
) -> bool:
    if len(a) != len(b):
        return False
    # `sorted` returns new lists; neither input is touched.
    return sorted(a) == sorted(b)
