"""Data model for the numeric value of a digit run."""

from dataclasses import dataclass, field
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Magnitude:
    """Unsigned value of a digit run, stored as its zero-stripped digits.

    Digits are kept as text rather than parsed into a number, so runs of any
    length compare correctly: shorter stripped sequences are smaller, and
    sequences of equal length compare lexicographically.
    """

    digits: str  # Stripped ASCII digits, "" for zero
    start: int = field(default=0, compare=False)  # Run start in the source string
    stop: int = field(default=0, compare=False)  # One past the last digit of the run

    @property
    def raw_length(self) -> int:
        """Number of characters the run occupies, leading zeros included."""
        return self.stop - self.start

    @property
    def is_zero(self) -> bool:
        """Whether the run held only zeros."""
        return not self.digits

    def __len__(self) -> int:
        return len(self.digits)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        if len(self.digits) != len(other.digits):
            return len(self.digits) < len(other.digits)
        return self.digits < other.digits

    def __int__(self) -> int:
        return int(self.digits) if self.digits else 0

    def __str__(self) -> str:
        return self.digits or "0"
