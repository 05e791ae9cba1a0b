"""
collcompare: order-independent, duplicate-aware collection equality.

    from collcompare import is_equal_collection

    is_equal_collection([2, 1, 3], [1, 2, 3])      # True
    is_equal_collection([0, 0, 1], [0, 1, 1])      # False
"""

from .equality import NullCollectionError, is_equal_collection

__version__ = "0.1.0"

__all__ = ["NullCollectionError", "is_equal_collection", "__version__"]
