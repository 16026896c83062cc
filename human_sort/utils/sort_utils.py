"""Sorting utilities, especially for natural sorting.

Module-level shortcuts around HumanComparator. Each function accepts either
an explicit ``config`` or the ``case_sensitive`` / ``digits`` overrides.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from functools import lru_cache
from typing import Any

from human_sort.config import DigitClass, HumanSortConfig, create_default_config
from human_sort.models import Ordering
from human_sort.services.comparator import HumanComparator


@lru_cache(maxsize=None)
def _comparator_for(config: HumanSortConfig) -> HumanComparator:
    return HumanComparator(config)


def _resolve(
    config: HumanSortConfig | None,
    case_sensitive: bool | None,
    digits: DigitClass | str | None,
) -> HumanComparator:
    if config is None:
        overrides: dict[str, Any] = {}
        if case_sensitive is not None:
            overrides["case_sensitive"] = case_sensitive
        if digits is not None:
            overrides["digits"] = digits
        config = create_default_config(**overrides)
    return _comparator_for(config)


def compare(
    a: str,
    b: str,
    *,
    config: HumanSortConfig | None = None,
    case_sensitive: bool | None = None,
    digits: DigitClass | str | None = None,
) -> Ordering:
    """Compare two strings in human order.

    Example:
        compare("item200", "item3")  # Ordering.GREATER
    """
    return _resolve(config, case_sensitive, digits).compare(a, b)


def sort(
    collection: MutableSequence[str],
    *,
    reverse: bool = False,
    config: HumanSortConfig | None = None,
    case_sensitive: bool | None = None,
    digits: DigitClass | str | None = None,
) -> None:
    """Sort strings in place in human order.

    Example:
        files = ["file10.txt", "file2.txt", "file1.txt"]
        sort(files)
        # files == ["file1.txt", "file2.txt", "file10.txt"]
    """
    _resolve(config, case_sensitive, digits).sort(collection, reverse=reverse)


def human_sorted(
    items: Iterable[str],
    *,
    reverse: bool = False,
    config: HumanSortConfig | None = None,
    case_sensitive: bool | None = None,
    digits: DigitClass | str | None = None,
) -> list[str]:
    """Return a new list of strings in human order."""
    return _resolve(config, case_sensitive, digits).sorted(items, reverse=reverse)


def natural_sort_key(
    text: str,
    *,
    config: HumanSortConfig | None = None,
    case_sensitive: bool | None = None,
    digits: DigitClass | str | None = None,
) -> Any:
    """Generate a natural sort key for a string.

    Natural sorting treats numbers numerically rather than alphabetically.
    For example: file1, file2, file10 instead of file1, file10, file2

    Args:
        text: String to generate sort key for

    Returns:
        Key object ordered by the human comparator

    Example:
        files = ["file10.txt", "file2.txt", "file1.txt"]
        sorted(files, key=natural_sort_key)
        # Returns: ["file1.txt", "file2.txt", "file10.txt"]
    """
    return _resolve(config, case_sensitive, digits).sort_key(text)


def is_sorted(
    items: Sequence[str],
    *,
    config: HumanSortConfig | None = None,
    case_sensitive: bool | None = None,
    digits: DigitClass | str | None = None,
) -> bool:
    """Check whether strings are already in human order."""
    return _resolve(config, case_sensitive, digits).is_sorted(items)
