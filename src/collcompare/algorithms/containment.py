"""
Naive membership-based comparators.

These are the "obvious" ways to compare collections, and each one is wrong.
They live here so tests can pin down exactly how they fail and so the
benchmark can show what they cost.

Variants (config["variant"]):
    "one_way"       every element of b occurs in a
                    wrong: ignores what a has that b lacks, ignores duplicates
    "mutual"        one_way(a, b) and one_way(b, a)
                    wrong: [x, x] vs [x] compares equal
    "sized_mutual"  len(a) == len(b) and mutual
                    wrong: [x, x, y] vs [x, y, y] compares equal

Membership uses `in` on the original collection, so on lists each variant is
O(|a| * |b|).
"""

from __future__ import annotations

from typing import Any, Collection, Dict, Optional

VARIANTS = {"one_way", "mutual", "sized_mutual"}
DEFAULT_VARIANT = "sized_mutual"

__all__ = ["VARIANTS", "DEFAULT_VARIANT", "compare", "contains_all"]


def contains_all(container: Collection[Any], items: Collection[Any]) -> bool:
    """Return True iff every element of `items` is `in` `container`."""
    return all(x in container for x in items)


def compare(
    a: Collection[Any], b: Collection[Any], *, config: Optional[Dict[str, Any]] = None
) -> bool:
    variant = _parse_variant(config)

    if variant == "one_way":
        return contains_all(a, b)
    if variant == "mutual":
        return contains_all(a, b) and contains_all(b, a)
    # sized_mutual
    return len(a) == len(b) and contains_all(a, b) and contains_all(b, a)


def _parse_variant(config: Optional[Dict[str, Any]]) -> str:
    if config is None:
        return DEFAULT_VARIANT
    variant = config.get("variant", DEFAULT_VARIANT)
    if variant not in VARIANTS:
        raise ValueError(
            f"Unsupported containment variant: {variant!r}. Supported: {sorted(VARIANTS)}"
        )
    return variant
