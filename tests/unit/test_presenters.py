"""Tests for presenter implementations."""

from human_sort.models import Ordering
from human_sort.presenters import ConsolePresenter, NullPresenter


class TestConsolePresenter:
    """Tests for ConsolePresenter."""

    def test_lines_go_to_stdout(self, capsys):
        ConsolePresenter().show_lines(["a1", "a2"])

        assert capsys.readouterr().out == "a1\na2\n"

    def test_ordering_printed_as_word(self, capsys):
        ConsolePresenter().show_ordering(Ordering.GREATER)

        assert capsys.readouterr().out == "greater\n"

    def test_messages_go_to_stderr(self, capsys):
        presenter = ConsolePresenter()
        presenter.show_info("reading input")
        presenter.show_error("bad input")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "reading input\n[ERROR] bad input\n"


class TestNullPresenter:
    """Tests for NullPresenter."""

    def test_records_everything(self):
        presenter = NullPresenter()
        presenter.show_info("info")
        presenter.show_error("error")
        presenter.show_lines(["x"])
        presenter.show_ordering(Ordering.EQUAL)

        assert presenter.messages == ["info"]
        assert presenter.errors == ["error"]
        assert presenter.lines == ["x"]
        assert presenter.orderings == [Ordering.EQUAL]

    def test_prints_nothing(self, capsys):
        NullPresenter().show_lines(["x"])

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
