"""Console presenter for CLI output."""

import sys

from human_sort.models import Ordering


class ConsolePresenter:
    """Present output to console (CLI implementation).

    Results go to stdout so they can be piped; messages go to stderr.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message, file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_lines(self, lines: list[str]) -> None:
        """Display sorted lines, one per line."""
        for line in lines:
            print(line)

    def show_ordering(self, ordering: Ordering) -> None:
        """Display the result of comparing two strings."""
        print(ordering)
