"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_equal

    - Property checks:
        multiplicity_diff
        assert_equal_collection
        assert_no_mutation
        is_symmetric
"""

from .oracle import ORACLE_NAME, oracle_equal
from .properties import (
    assert_equal_collection,
    assert_no_mutation,
    is_symmetric,
    multiplicity_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_equal",
    "multiplicity_diff",
    "assert_equal_collection",
    "assert_no_mutation",
    "is_symmetric",
]
