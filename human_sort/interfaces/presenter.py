"""Presenter protocol for output abstraction."""

from typing import Protocol

from human_sort.models import Ordering


class PresenterProtocol(Protocol):
    """Interface for presenting CLI output to the user.

    This protocol abstracts all output operations, allowing commands to be
    exercised in tests without writing to the terminal.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_lines(self, lines: list[str]) -> None:
        """Display sorted lines, one per line.

        Args:
            lines: Lines in output order
        """
        ...

    def show_ordering(self, ordering: Ordering) -> None:
        """Display the result of comparing two strings.

        Args:
            ordering: The comparison result
        """
        ...
