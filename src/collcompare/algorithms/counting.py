"""Hash-counting comparator: O(|a| + |b|). Delegates to the library function."""

from __future__ import annotations

from typing import Any, Collection, Dict, Optional

from collcompare.equality import is_equal_collection

__all__ = ["compare"]


def compare(
    a: Collection[Any], b: Collection[Any], *, config: Optional[Dict[str, Any]] = None
) -> bool:
    # No tunables; config is accepted for signature compatibility.
    return is_equal_collection(a, b)
