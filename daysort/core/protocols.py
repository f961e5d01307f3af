"""Protocol definitions (interfaces) for dependency injection."""
from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from .models import OrganizeEvent, RunStats


class ProgressReporter(Protocol):
    """Interface for reporting organize decisions to the operator.

    Implementations:
    - RichProgressReporter: Rich console output
    - QuietProgressReporter: warnings and errors only
    """

    @abstractmethod
    def event(self, event: OrganizeEvent) -> None:
        """Report a single organize decision."""
        ...

    @abstractmethod
    def scanning(self, directory: Path) -> None:
        """Called before a directory is listed."""
        ...

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...

    @abstractmethod
    def debug(self, message: str) -> None:
        ...

    @abstractmethod
    def print_header(self, title: str) -> None:
        ...

    @abstractmethod
    def print_config(self, config_items: dict) -> None:
        ...

    @abstractmethod
    def print_stats(self, stats: RunStats) -> None:
        ...


class FileOperations(Protocol):
    """Interface for the filesystem mutations the organizer performs."""

    @abstractmethod
    def destination_for(self, source: Path, mtime_ns: int) -> Path:
        """Compute the dated destination path for a file."""
        ...

    @abstractmethod
    def ensure_parent(self, target: Path) -> None:
        """Create the parent directory chain of ``target``."""
        ...

    @abstractmethod
    def copy(self, source: Path, target: Path) -> int:
        """Copy ``source`` to ``target``. Returns bytes copied."""
        ...

    @abstractmethod
    def set_mtime(self, target: Path, mtime_ns: int) -> None:
        """Set modification time of ``target``."""
        ...
