"""Rich-based progress reporter implementation."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from ..core.models import Action, OrganizeEvent, RunStats


class RichProgressReporter:
    """Progress reporter using Rich for terminal output.

    Implements the ProgressReporter protocol with Rich console output.
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        console: Optional[Console] = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Enable verbose output.
            quiet: Suppress all non-essential output.
            console: Console to print to (defaults to stderr).
        """
        self._console = console or Console(stderr=True)
        self._verbose = verbose
        self._quiet = quiet
        self._status: Optional[Status] = None

    # --- Organize events ---

    def event(self, event: OrganizeEvent) -> None:
        """Print an organize decision."""
        if event.is_problem:
            self.warning(event.message)
        elif event.action in (Action.COPY, Action.OVERWRITE) and not event.dry_run:
            self.success(event.message)
        else:
            self.info(event.message)

    def scanning(self, directory: Path) -> None:
        """Show the directory being listed in a spinner line."""
        if self._quiet or not self._console.is_terminal:
            return
        if self._status is None:
            self._status = self._console.status(f"Scanning {escape(str(directory))}", spinner="dots")
            self._status.start()
        else:
            self._status.update(f"Scanning {escape(str(directory))}")

    def stop(self) -> None:
        """Stop the scanning spinner, if running."""
        if self._status is not None:
            self._status.stop()
            self._status = None

    # --- Logging Methods ---

    def info(self, message: str) -> None:
        """Log an info message."""
        if not self._quiet:
            self._console.print(f"[blue]ℹ[/blue] {escape(message)}", highlight=False)

    def success(self, message: str) -> None:
        """Log a success message."""
        if not self._quiet:
            self._console.print(f"[green]✓[/green] {escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        """Log an error message."""
        self._console.print(f"[red]✗[/red] {escape(message)}", style="red", highlight=False)

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose:
            self._console.print(f"[dim]  {escape(message)}[/dim]", highlight=False)

    # --- Specialized Output ---

    def print_header(self, title: str) -> None:
        """Print a styled header."""
        if self._quiet:
            return

        text = Text(title, style="bold cyan")
        self._console.print(Panel(text, border_style="cyan"))

    def print_config(self, config_items: dict) -> None:
        """Print configuration as a table."""
        if self._quiet:
            return

        table = Table(title="Configuration", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        for key, value in config_items.items():
            table.add_row(key, str(value))

        self._console.print(table)

    def print_stats(self, stats: RunStats) -> None:
        """Print run statistics."""
        self.stop()
        if self._quiet:
            return

        table = Table(title="Organize Complete", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Files Seen", str(stats.files_seen))
        table.add_row("Copied", str(stats.copied))
        table.add_row("Overwritten", str(stats.overwritten))
        table.add_row("Already Present", str(stats.skipped_existing))
        table.add_row("Too Small", str(stats.too_small))
        table.add_row("Skipped Folders", str(stats.skipped_dirs))

        if stats.unknown > 0:
            table.add_row("Unknown Extensions", str(stats.unknown))
        if stats.no_timestamp or stats.mtime_failures:
            table.add_row("Timestamp Problems", str(stats.no_timestamp + stats.mtime_failures))

        if stats.elapsed_seconds > 0:
            rate = stats.files_seen / stats.elapsed_seconds
            table.add_row("", "")  # Blank row
            table.add_row("Bytes Copied", f"{stats.bytes_copied:,}")
            table.add_row("Time Elapsed", f"{stats.elapsed_seconds:.1f}s")
            table.add_row("Processing Rate", f"{rate:.1f} files/sec")

        self._console.print(table)

    # --- Context Managers ---

    def __enter__(self) -> "RichProgressReporter":
        return self

    def __exit__(self, *args) -> None:
        self.stop()


class QuietProgressReporter:
    """Minimal progress reporter that only shows problems and errors."""

    def event(self, event: OrganizeEvent) -> None:
        if event.is_problem:
            self.warning(event.message)

    def scanning(self, directory: Path) -> None:
        pass

    def stop(self) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        pass

    def print_header(self, title: str) -> None:
        pass

    def print_config(self, config_items: dict) -> None:
        pass

    def print_stats(self, stats: RunStats) -> None:
        pass

    def __enter__(self) -> "QuietProgressReporter":
        return self

    def __exit__(self, *args) -> None:
        pass
