"""Extraction of digit runs as comparable magnitudes."""

from human_sort.exceptions import InvalidPositionError
from human_sort.interfaces import DigitClassifier
from human_sort.models import Cursor, Magnitude


def extract_numeric_run(cursor: Cursor, classifier: DigitClassifier) -> Magnitude:
    """Consume the digit run at the cursor and return its magnitude.

    The cursor is advanced past every digit of the run, leading zeros
    included, and is left on the first non-digit (or at the end of input).
    Leading zeros are dropped from the magnitude, so "007" and "7" yield
    equal values and "000" yields zero.

    Args:
        cursor: Cursor positioned on a digit
        classifier: Policy deciding which characters are digits

    Returns:
        Magnitude of the run

    Raises:
        InvalidPositionError: If the cursor is not on a digit. The cursor is
            left where it was.

    Example:
        cursor = Cursor("007d")
        extract_numeric_run(cursor, AsciiDigitClassifier())  # Magnitude("7")
        cursor.peek()  # "d"
    """
    char = cursor.peek()
    if char is None or not classifier.is_digit(char):
        raise InvalidPositionError(cursor.position, char)

    text = cursor.text
    start = cursor.position
    stop = start
    significant = None  # Index of the first non-zero digit
    while stop < len(text) and classifier.is_digit(text[stop]):
        if significant is None and classifier.digit_value(text[stop]) != 0:
            significant = stop
        stop += 1

    cursor.advance(stop - start)

    if significant is None:
        return Magnitude("", start, stop)
    return Magnitude(_ascii_digits(text[significant:stop], classifier), start, stop)


def _ascii_digits(run: str, classifier: DigitClassifier) -> str:
    """Normalize a run to ASCII digits so runs from different scripts compare by value."""
    if run.isascii():
        return run
    return "".join(str(classifier.digit_value(char)) for char in run)
