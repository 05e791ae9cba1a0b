"""
Interchangeable collection comparators.

Every module in this package exposes the same signature so the benchmark
runner can load it by name:

    compare(a: Collection, b: Collection, *, config: dict | None = None) -> bool

Modules:
    counting      hash-counting comparison (the library's algorithm)
    containment   naive membership checks; kept to show how they go wrong
    pairwise      equality-only matching, no hashing, quadratic
    sorted_merge  sort both sides and compare, needs orderable elements
"""

AVAILABLE = ("counting", "containment", "pairwise", "sorted_merge")

__all__ = ["AVAILABLE"]
