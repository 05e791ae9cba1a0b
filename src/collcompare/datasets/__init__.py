"""
Datasets package public API.

Re-export the pair generator so callers can write:
    from collcompare.datasets import make_pair, SUPPORTED_DISTS, SUPPORTED_RELATIONS
"""

from .generators import SUPPORTED_DISTS, SUPPORTED_RELATIONS, make_pair

__all__ = ["make_pair", "SUPPORTED_DISTS", "SUPPORTED_RELATIONS"]
