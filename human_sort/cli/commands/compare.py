"""CLI command for comparing two strings."""

from __future__ import annotations

from human_sort.config import create_default_config
from human_sort.exceptions import HumanSortException
from human_sort.interfaces import PresenterProtocol
from human_sort.presenters import ConsolePresenter
from human_sort.services import HumanComparator


def compare_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the compare subcommand.

    Prints "less", "equal" or "greater" for the first string relative to
    the second.

    Args:
        args: Parsed command-line arguments
        presenter: Output sink (defaults to ConsolePresenter)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()

    try:
        config = create_default_config(case_sensitive=args.case_sensitive, digits=args.digits)
    except HumanSortException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    presenter.show_ordering(HumanComparator(config).compare(args.left, args.right))
    return 0
