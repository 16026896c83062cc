"""Pytest configuration and shared fixtures."""

import pytest

from human_sort.config import HumanSortConfig
from human_sort.presenters import NullPresenter
from human_sort.services import AsciiDigitClassifier, HumanComparator, UnicodeDigitClassifier


@pytest.fixture
def default_config():
    """Provide the default configuration (case-insensitive, ASCII digits)."""
    return HumanSortConfig()


@pytest.fixture
def comparator(default_config):
    """Provide a comparator with the default configuration."""
    return HumanComparator(default_config)


@pytest.fixture
def case_sensitive_comparator():
    """Provide a comparator that compares raw code points."""
    return HumanComparator(HumanSortConfig(case_sensitive=True))


@pytest.fixture
def unicode_comparator():
    """Provide a comparator that accepts digits from any script."""
    return HumanComparator(HumanSortConfig(digits="unicode"))


@pytest.fixture
def ascii_digits():
    """Provide the ASCII digit classifier."""
    return AsciiDigitClassifier()


@pytest.fixture
def unicode_digits():
    """Provide the Unicode decimal digit classifier."""
    return UnicodeDigitClassifier()


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (records output)."""
    return NullPresenter()


@pytest.fixture
def long_number():
    """Provide a 120-digit number that does not fit any machine word."""
    return "1" + "0" * 118 + "1"
