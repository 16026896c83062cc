"""Services for Human Sort."""

from .classifiers import AsciiDigitClassifier, UnicodeDigitClassifier, get_classifier
from .comparator import HumanComparator
from .numeric_run import extract_numeric_run

__all__ = [
    "AsciiDigitClassifier",
    "UnicodeDigitClassifier",
    "get_classifier",
    "HumanComparator",
    "extract_numeric_run",
]
