"""Organizer service - walks source trees and copies media into dated folders.

Traversal is depth-first, pre-order, driven by an explicit stack so that
arbitrarily deep trees do not hit the recursion limit. Every decision is
recorded as an OrganizeEvent and forwarded to the reporter.

Fatal conditions (missing source, unlistable directory, failed mkdir or copy)
raise OrganizeError subclasses and stop the run. Per-file problems are
reported as events and the walk continues.
"""
from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Optional

from ..core.config import OrganizerConfig
from ..core.errors import DirectoryListingError, SourceNotFoundError
from ..core.models import Action, FileClass, FileEntry, OrganizeEvent, RunStats
from ..core.protocols import FileOperations, ProgressReporter
from .classifier import classify, extension_of
from .file_ops import FileManager

logger = logging.getLogger(__name__)


def is_skipped_name(name: str, skip_dirs: frozenset[str]) -> bool:
    """Hidden entries and exact skip-list names are never visited."""
    return name.startswith(".") or name in skip_dirs


class Organizer:
    """Copies media files from source trees into ``destination/YYYY/MM/DD``.

    The same instance can process several source roots; events and stats
    accumulate across them.
    """

    def __init__(
        self,
        config: OrganizerConfig,
        reporter: Optional[ProgressReporter] = None,
        file_ops: Optional[FileOperations] = None,
    ):
        """Initialize the organizer.

        Args:
            config: Run configuration.
            reporter: Receives every event as it happens.
            file_ops: Filesystem operations; defaults to a FileManager on
                the configured destination.
        """
        self._config = config
        self._reporter = reporter
        self._files = file_ops or FileManager(config.destination)
        self._visited_dirs: set[tuple[int, int]] = set()
        self.events: list[OrganizeEvent] = []
        self.stats = RunStats()

    @property
    def config(self) -> OrganizerConfig:
        return self._config

    def organize(self, sources: list[Path]) -> RunStats:
        """Process each source root in order.

        Each root is checked for existence just before it is processed, so
        earlier roots are fully handled before a missing later one aborts.
        """
        start = time.monotonic()
        try:
            for source in sources:
                self.process_source(source)
        finally:
            self.stats.elapsed_seconds += time.monotonic() - start
        return self.stats

    def process_source(self, source: Path) -> None:
        """Walk one source root."""
        if not source.exists():
            raise SourceNotFoundError(f"Source doesn't exist: {source}", source)

        logger.debug("Processing source %s", source)
        self._visited_dirs.clear()
        stack = [source]
        while stack:
            path = stack.pop()
            if path.is_dir():
                if self._enter_directory(path):
                    # Reversed so children pop in sorted order
                    stack.extend(reversed(self._list_children(path)))
            elif path.is_file():
                self._process_file(path)
            else:
                logger.debug("Ignoring %s (not a regular file or directory)", path)

    # --- Traversal ---

    def _enter_directory(self, directory: Path) -> bool:
        try:
            st = directory.stat()
        except OSError as e:
            raise DirectoryListingError(f"read_dir failed at {directory}: {e}", directory) from e
        key = (st.st_dev, st.st_ino)
        if key in self._visited_dirs:
            logger.debug("Already visited %s", directory)
            return False
        self._visited_dirs.add(key)
        return True

    def _list_children(self, directory: Path) -> list[Path]:
        if self._reporter:
            self._reporter.scanning(directory)
        try:
            with os.scandir(directory) as it:
                names = sorted(entry.name for entry in it)
        except OSError as e:
            raise DirectoryListingError(f"read_dir failed at {directory}: {e}", directory) from e

        children = []
        for name in names:
            child = directory / name
            if is_skipped_name(name, self._config.skip_dirs):
                self._emit(OrganizeEvent(Action.SKIP_DIR, child))
            elif child.is_symlink() and not self._config.follow_symlinks:
                logger.debug("Not following symlink %s", child)
            else:
                children.append(child)
        return children

    # --- Per-file decision ---

    def _process_file(self, path: Path) -> None:
        self.stats.files_seen += 1
        file_class = classify(path, self._config.rules)

        if file_class is FileClass.UNKNOWN:
            self._emit(OrganizeEvent(Action.UNKNOWN, path, detail=extension_of(path)))
            return
        if file_class is not FileClass.IMAGE:
            return

        try:
            st = path.stat()
        except OSError as e:
            self._emit(OrganizeEvent(Action.NO_TIMESTAMP, path, detail=str(e)))
            return
        entry = FileEntry(path=path, size=st.st_size, mtime_ns=st.st_mtime_ns)

        if entry.size < self._config.min_size:
            self._emit(OrganizeEvent(Action.TOO_SMALL, path, detail=str(entry.size)))
            return

        try:
            target = self._files.destination_for(path, entry.mtime_ns)
        except (OverflowError, ValueError, OSError) as e:
            self._emit(OrganizeEvent(Action.NO_TIMESTAMP, path, detail=str(e)))
            return

        self._place(entry, target)

    def _place(self, entry: FileEntry, target: Path) -> None:
        dry_run = self._config.dry_run
        if not dry_run:
            self._files.ensure_parent(target)

        exists = target.exists()
        if exists and not self._config.overwrite:
            self._emit(OrganizeEvent(Action.SKIP_EXISTING, entry.path, target, dry_run=dry_run))
            return

        action = Action.OVERWRITE if exists else Action.COPY
        if dry_run:
            self._emit(OrganizeEvent(action, entry.path, target, dry_run=True))
            return

        self.stats.bytes_copied += self._files.copy(entry.path, target)
        try:
            self._files.set_mtime(target, entry.mtime_ns)
        except OSError as e:
            self._emit(OrganizeEvent(Action.MTIME_FAILED, entry.path, target, detail=str(e)))
        self._emit(OrganizeEvent(action, entry.path, target))

    def _emit(self, event: OrganizeEvent) -> None:
        self.events.append(event)
        self.stats.record(event)
        if self._reporter:
            self._reporter.event(event)
