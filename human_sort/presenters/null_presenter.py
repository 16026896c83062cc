"""Null presenter for testing (records output instead of printing)."""

from human_sort.models import Ordering


class NullPresenter:
    """Present output to nowhere (testing implementation).

    Everything shown is kept on the instance so tests can inspect it.
    """

    def __init__(self):
        self.messages: list[str] = []
        self.errors: list[str] = []
        self.lines: list[str] = []
        self.orderings: list[Ordering] = []

    def show_info(self, message: str) -> None:
        """Display an informational message (recorded)."""
        self.messages.append(message)

    def show_error(self, message: str) -> None:
        """Display an error message (recorded)."""
        self.errors.append(message)

    def show_lines(self, lines: list[str]) -> None:
        """Display sorted lines (recorded)."""
        self.lines.extend(lines)

    def show_ordering(self, ordering: Ordering) -> None:
        """Display a comparison result (recorded)."""
        self.orderings.append(ordering)
