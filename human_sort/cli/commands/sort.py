"""CLI command for sorting lines in human order."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from human_sort.config import create_default_config
from human_sort.exceptions import HumanSortException
from human_sort.interfaces import PresenterProtocol
from human_sort.models import Ordering
from human_sort.presenters import ConsolePresenter
from human_sort.services import HumanComparator

logger = logging.getLogger(__name__)


def read_lines(files: list[str]) -> list[str]:
    """Read input lines from files, or from stdin when no files are given.

    Args:
        files: Paths to read, in order

    Returns:
        All lines without line terminators

    Raises:
        OSError: If a file cannot be read
    """
    if not files:
        return sys.stdin.read().splitlines()

    lines: list[str] = []
    for name in files:
        path = Path(name)
        lines.extend(path.read_text(encoding="utf-8").splitlines())
        logger.debug(f"Read {path}")
    return lines


def drop_equal_neighbours(lines: list[str], comparator: HumanComparator) -> list[str]:
    """Keep only the first of each group of adjacent lines that compare equal."""
    unique: list[str] = []
    for line in lines:
        if unique and comparator.compare(unique[-1], line) is Ordering.EQUAL:
            continue
        unique.append(line)
    return unique


def sort_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the sort subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output sink (defaults to ConsolePresenter)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()

    try:
        config = create_default_config(case_sensitive=args.case_sensitive, digits=args.digits)
        comparator = HumanComparator(config)
        lines = read_lines(args.files)
    except HumanSortException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        presenter.show_error(f"Could not read input: {e}")
        return 1

    comparator.sort(lines, reverse=args.reverse)
    if args.unique:
        lines = drop_equal_neighbours(lines, comparator)

    presenter.show_lines(lines)
    return 0
