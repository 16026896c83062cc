"""Service for comparing and sorting strings in human order."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence, Sequence
from functools import cmp_to_key
from itertools import pairwise

from human_sort.config import HumanSortConfig, create_default_config
from human_sort.models import Cursor, Ordering
from human_sort.services.classifiers import get_classifier
from human_sort.services.numeric_run import extract_numeric_run

logger = logging.getLogger(__name__)


class HumanComparator:
    """Compare strings treating digit runs as numbers (stateless service).

    Instances hold only their frozen configuration, so one comparator can be
    reused by any number of sorts and shared between threads.
    """

    def __init__(self, config: HumanSortConfig | None = None):
        """Initialize the comparator.

        Args:
            config: Comparison configuration (defaults to create_default_config())
        """
        self.config = config or create_default_config()
        self.classifier = get_classifier(self.config.digits)
        self.sort_key = cmp_to_key(self.compare)
        logger.debug(
            f"Comparator ready: {self.classifier.name}, "
            f"case_sensitive={self.config.case_sensitive}"
        )

    def compare(self, a: str, b: str) -> Ordering:
        """Compare two strings in human order.

        Both strings are walked left to right with one cursor each. Where both
        cursors sit on digits, the full digit runs are compared by magnitude
        (the runs may differ in length); anywhere else single characters are
        compared. The first difference decides. A string that runs out first
        is the smaller one.

        Args:
            a: Left string
            b: Right string

        Returns:
            Ordering of a relative to b

        Example:
            comparator.compare("file2.txt", "file10.txt")  # Ordering.LESS
        """
        left = Cursor(a)
        right = Cursor(b)
        is_digit = self.classifier.is_digit
        fold_case = not self.config.case_sensitive

        while True:
            x = left.peek()
            y = right.peek()

            if x is None or y is None:
                if x is None and y is None:
                    return Ordering.EQUAL
                return Ordering.LESS if x is None else Ordering.GREATER

            if is_digit(x) and is_digit(y):
                left_value = extract_numeric_run(left, self.classifier)
                right_value = extract_numeric_run(right, self.classifier)
                if left_value != right_value:
                    return Ordering.of(left_value, right_value)
                # Both cursors already sit past their runs
                continue

            # A lone digit compares as its ASCII form, so digits from any
            # script sit between "/" and ":" like runs do
            if is_digit(x):
                x = str(self.classifier.digit_value(x))
            elif is_digit(y):
                y = str(self.classifier.digit_value(y))
            if fold_case:
                x, y = x.lower(), y.lower()
            if x != y:
                return Ordering.of(x, y)

            left.advance()
            right.advance()

    def sort(self, collection: MutableSequence[str], reverse: bool = False) -> None:
        """Sort a mutable sequence of strings in place.

        Lists are sorted with list.sort; other mutable sequences get their
        contents replaced through slice assignment.

        Args:
            collection: Strings to reorder
            reverse: Sort in descending order
        """
        logger.debug(f"Sorting {len(collection)} items in place (reverse={reverse})")
        if isinstance(collection, list):
            collection.sort(key=self.sort_key, reverse=reverse)
        else:
            collection[:] = sorted(collection, key=self.sort_key, reverse=reverse)

    def sorted(self, items: Iterable[str], reverse: bool = False) -> list[str]:
        """Return a new list with the strings in human order.

        Args:
            items: Strings to order (left untouched)
            reverse: Sort in descending order

        Returns:
            Sorted list
        """
        result = list(items)
        self.sort(result, reverse=reverse)
        return result

    def is_sorted(self, items: Sequence[str]) -> bool:
        """Check that every adjacent pair is in ascending (or equal) order."""
        return all(self.compare(a, b) is not Ordering.GREATER for a, b in pairwise(items))
