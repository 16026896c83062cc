"""Unicode decimal digit classification."""

import unicodedata


class UnicodeDigitClassifier:
    """Treat every character with a decimal digit value as a digit.

    This covers ASCII digits as well as e.g. Arabic-Indic (U+0660-U+0669) or
    fullwidth (U+FF10-U+FF19) digits. Superscripts and other numeric
    characters without a decimal value are not digits.
    """

    @property
    def name(self) -> str:
        return "Unicode decimal digits"

    def is_digit(self, char: str) -> bool:
        return char.isdecimal()

    def digit_value(self, char: str) -> int:
        return unicodedata.decimal(char)
