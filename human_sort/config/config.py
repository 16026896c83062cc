"""Configuration classes for Human Sort."""

from dataclasses import dataclass
from enum import Enum

from human_sort.exceptions import ConfigurationError


class DigitClass(str, Enum):
    """Which characters count as decimal digits."""

    ASCII = "ascii"  # 0-9 only
    UNICODE = "unicode"  # any character with a decimal digit value (str.isdecimal)


@dataclass(frozen=True)
class HumanSortConfig:
    """Immutable configuration for string comparison.

    All configuration is frozen (immutable) so a comparator built from it
    can be shared between threads and reused by sort routines.
    """

    # Character comparison
    case_sensitive: bool = False  # False = compare lower-cased characters

    # Digit classification
    digits: DigitClass = DigitClass.ASCII

    def __post_init__(self):
        """Convert string digit classes to DigitClass if needed."""
        if not isinstance(self.digits, DigitClass):
            try:
                object.__setattr__(self, "digits", DigitClass(str(self.digits).lower()))
            except ValueError:
                choices = ", ".join(d.value for d in DigitClass)
                raise ConfigurationError(
                    f"Unknown digit class {self.digits!r} (expected one of: {choices})"
                ) from None
        if not isinstance(self.case_sensitive, bool):
            raise ConfigurationError(
                f"case_sensitive must be a bool, got {type(self.case_sensitive).__name__}"
            )
