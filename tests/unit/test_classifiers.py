"""Tests for digit classifier implementations."""

import pytest

from human_sort.config import DigitClass
from human_sort.services.classifiers import (
    AsciiDigitClassifier,
    UnicodeDigitClassifier,
    get_classifier,
)


class TestAsciiDigitClassifier:
    """Tests for AsciiDigitClassifier."""

    @pytest.mark.parametrize("char", list("0123456789"))
    def test_ascii_digits(self, ascii_digits, char):
        assert ascii_digits.is_digit(char)
        assert ascii_digits.digit_value(char) == int(char)

    @pytest.mark.parametrize("char", ["a", "/", ":", " ", "٣", "１", "²", "½"])
    def test_non_digits(self, ascii_digits, char):
        assert not ascii_digits.is_digit(char)


class TestUnicodeDigitClassifier:
    """Tests for UnicodeDigitClassifier."""

    @pytest.mark.parametrize(
        "char, value",
        [("7", 7), ("٣", 3), ("１", 1), ("०", 0), ("९", 9)],
    )
    def test_decimal_digits(self, unicode_digits, char, value):
        assert unicode_digits.is_digit(char)
        assert unicode_digits.digit_value(char) == value

    @pytest.mark.parametrize("char", ["a", "²", "½", "Ⅻ", "-"])
    def test_numeric_but_not_decimal(self, unicode_digits, char):
        """Superscripts, fractions and numerals without a decimal value are not digits."""
        assert not unicode_digits.is_digit(char)


class TestGetClassifier:
    """Tests for get_classifier function."""

    def test_ascii(self):
        assert isinstance(get_classifier(DigitClass.ASCII), AsciiDigitClassifier)

    def test_unicode(self):
        assert isinstance(get_classifier(DigitClass.UNICODE), UnicodeDigitClassifier)
