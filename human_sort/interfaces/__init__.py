"""Interface protocols for Human Sort."""

from .digit_classifier import DigitClassifier
from .presenter import PresenterProtocol

__all__ = ["DigitClassifier", "PresenterProtocol"]
