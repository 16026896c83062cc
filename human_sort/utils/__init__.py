"""Utility functions for Human Sort."""

from .sort_utils import compare, human_sorted, is_sorted, natural_sort_key, sort

__all__ = [
    "compare",
    "sort",
    "human_sorted",
    "natural_sort_key",
    "is_sorted",
]
