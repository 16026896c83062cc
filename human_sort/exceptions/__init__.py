"""Custom exceptions for Human Sort."""

from .base import HumanSortException
from .extraction import InvalidPositionError, NotADigitError
from .validation import ConfigurationError

__all__ = [
    "HumanSortException",
    "InvalidPositionError",
    "NotADigitError",
    "ConfigurationError",
]
