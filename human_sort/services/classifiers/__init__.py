"""Digit classifier implementations."""

from human_sort.config import DigitClass
from human_sort.interfaces import DigitClassifier

from .ascii_classifier import AsciiDigitClassifier
from .unicode_classifier import UnicodeDigitClassifier


def get_classifier(digit_class: DigitClass) -> DigitClassifier:
    """Return the classifier implementing a configured digit class.

    Args:
        digit_class: Digit classification from the configuration

    Returns:
        Classifier instance for that digit class
    """
    if digit_class is DigitClass.UNICODE:
        return UnicodeDigitClassifier()
    return AsciiDigitClassifier()


__all__ = ["AsciiDigitClassifier", "UnicodeDigitClassifier", "get_classifier"]
