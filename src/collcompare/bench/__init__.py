"""
Benchmark harness public API.

Re-exports the timing harness so callers can write:
    from collcompare.bench import time_compare_call
The runner is used as a script: python -m collcompare.bench.runner CONFIG
"""

from .measure import time_compare_call

__all__ = ["time_compare_call"]
