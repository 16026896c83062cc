"""
Human Sort - Natural Ordering for Text

Compares and sorts strings the way a person reads them: embedded runs of
digits are compared by numeric magnitude, so "file2" sorts before "file10".
"""

__version__ = "1.0.0"
__author__ = "Human Sort Contributors"

from .models import Ordering
from .utils.sort_utils import compare, human_sorted, is_sorted, natural_sort_key, sort

__all__ = [
    "Ordering",
    "compare",
    "sort",
    "human_sorted",
    "natural_sort_key",
    "is_sorted",
]
