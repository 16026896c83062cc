"""Protocol for deciding which characters are decimal digits."""

from typing import Protocol


class DigitClassifier(Protocol):
    """Interface for a digit classification policy.

    A comparator uses exactly one classifier for every character it looks
    at, so the ASCII and Unicode notions of a digit are never mixed within
    a single comparison.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this classifier (e.g., 'ASCII digits')."""
        ...

    def is_digit(self, char: str) -> bool:
        """Check whether a single character is a decimal digit."""
        ...

    def digit_value(self, char: str) -> int:
        """Return the value 0-9 of a character for which is_digit is True."""
        ...
