"""Three-way comparison result."""

from enum import IntEnum
from typing import Any


class Ordering(IntEnum):
    """Result of comparing two values.

    The integer values follow the classic ``cmp`` convention, so an
    Ordering can be handed straight to ``functools.cmp_to_key``.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: Any, right: Any) -> "Ordering":
        """Compare two values supporting ``<`` and ``==``.

        Example:
            Ordering.of("a", "b")  # Ordering.LESS
        """
        if left == right:
            return cls.EQUAL
        return cls.LESS if left < right else cls.GREATER

    def reverse(self) -> "Ordering":
        """Swap LESS and GREATER, leaving EQUAL untouched."""
        return Ordering(-self.value)

    def __str__(self) -> str:
        return self.name.lower()
