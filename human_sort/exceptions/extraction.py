"""Digit run extraction exceptions."""

from .base import HumanSortException


class InvalidPositionError(HumanSortException):
    """Raised when a digit run is extracted from a cursor not on a digit.

    This is a programmer error: callers peek at the cursor and check the
    character with the digit classifier before extracting.
    """

    def __init__(self, position: int, character: str | None):
        self.position = position
        self.character = character
        if character is None:
            message = f"Expected a digit at position {position}, found end of input"
        else:
            message = f"Expected a digit at position {position}, found {character!r}"
        super().__init__(message)


NotADigitError = InvalidPositionError
