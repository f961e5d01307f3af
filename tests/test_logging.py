"""Tests for Rich progress reporter."""
import pytest
from io import StringIO
from pathlib import Path

from rich.console import Console

from daysort.core.models import Action, OrganizeEvent, RunStats
from daysort.logging.rich_logger import RichProgressReporter, QuietProgressReporter


def make_reporter(**kwargs) -> tuple[RichProgressReporter, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=200)
    return RichProgressReporter(console=console, **kwargs), buffer


class TestRichProgressReporter:
    """Tests for Rich progress reporter."""

    def test_create_default(self):
        reporter = RichProgressReporter()
        assert reporter._verbose is False
        assert reporter._quiet is False

    def test_copy_event(self):
        reporter, buffer = make_reporter()
        reporter.event(OrganizeEvent(Action.COPY, Path("/s/a.jpg"), Path("/d/2022/07/01/a.jpg")))
        assert "Copy /s/a.jpg /d/2022/07/01/a.jpg" in buffer.getvalue()

    def test_unknown_event_is_warning(self):
        reporter, buffer = make_reporter(quiet=True)
        reporter.event(OrganizeEvent(Action.UNKNOWN, Path("x.weird"), detail="weird"))
        assert "Unknown weird" in buffer.getvalue()

    def test_quiet_hides_info(self):
        reporter, buffer = make_reporter(quiet=True)
        reporter.event(OrganizeEvent(Action.COPY, Path("a.jpg"), Path("b.jpg")))
        reporter.info("hello")
        assert buffer.getvalue() == ""

    def test_skip_dir_shown_by_default(self):
        event = OrganizeEvent(Action.SKIP_DIR, Path("/s/.git"))

        reporter, buffer = make_reporter()
        reporter.event(event)
        assert "Skip .git" in buffer.getvalue()

        reporter, buffer = make_reporter(quiet=True)
        reporter.event(event)
        assert buffer.getvalue() == ""

    def test_markup_in_filenames_is_escaped(self):
        reporter, buffer = make_reporter()
        reporter.info("Copy /s/[red]photo[/red].jpg")
        assert "[red]photo[/red].jpg" in buffer.getvalue()

    def test_error(self):
        reporter, buffer = make_reporter(quiet=True)
        reporter.error("Destination is not a directory /x")
        assert "Destination is not a directory /x" in buffer.getvalue()

    def test_scanning_without_terminal_is_silent(self):
        reporter, buffer = make_reporter()
        reporter.scanning(Path("/s"))
        reporter.stop()
        assert buffer.getvalue() == ""

    def test_print_config(self):
        reporter, buffer = make_reporter()
        reporter.print_config({"Destination": "/d", "Dry Run": True})
        output = buffer.getvalue()
        assert "Destination" in output
        assert "/d" in output

    def test_print_stats(self):
        reporter, buffer = make_reporter()
        stats = RunStats(files_seen=10, copied=4, unknown=2, elapsed_seconds=2.0, bytes_copied=2048)
        reporter.print_stats(stats)
        output = buffer.getvalue()
        assert "Copied" in output
        assert "Unknown Extensions" in output
        assert "2,048" in output

    def test_context_manager(self):
        reporter, _ = make_reporter()
        with reporter as r:
            assert r is reporter


class TestQuietProgressReporter:
    """Tests for the quiet reporter."""

    def test_only_problems(self, capsys):
        reporter = QuietProgressReporter()
        reporter.event(OrganizeEvent(Action.COPY, Path("a.jpg"), Path("b.jpg")))
        reporter.event(OrganizeEvent(Action.UNKNOWN, Path("x.weird"), detail="weird"))
        reporter.info("ignored")

        captured = capsys.readouterr()
        assert captured.err == "WARNING: Unknown weird\n"
        assert captured.out == ""

    def test_error(self, capsys):
        QuietProgressReporter().error("boom")
        assert capsys.readouterr().err == "ERROR: boom\n"
