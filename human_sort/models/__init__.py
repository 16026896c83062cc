"""Data models for Human Sort."""

from .cursor import Cursor
from .magnitude import Magnitude
from .ordering import Ordering

__all__ = [
    "Cursor",
    "Magnitude",
    "Ordering",
]
