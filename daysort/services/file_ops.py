"""File operations service."""
from __future__ import annotations

import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from ..core.errors import CopyError, DirectoryCreateError

logger = logging.getLogger(__name__)


def timestamp_to_utc(mtime_ns: int) -> datetime:
    """Convert a nanosecond timestamp to an aware UTC datetime, truncated to seconds.

    Raises OverflowError, ValueError or OSError for values the platform
    cannot represent.
    """
    return datetime.fromtimestamp(mtime_ns // 1_000_000_000, tz=timezone.utc)


def build_destination(root: Path, taken: datetime, filename: str) -> Path:
    """Build ``root/YYYY/MM/DD/filename``."""
    return root / f"{taken.year:04d}" / f"{taken.month:02d}" / f"{taken.day:02d}" / filename


def copy_file(source: Path, target: Path) -> int:
    """Copy ``source`` to ``target`` and return the number of bytes copied.

    The source is read fully before the target is opened. If writing fails
    the partial target is removed. Raises CopyError on any failure, including
    a source that is not a regular file.
    """
    try:
        with open(source, "rb") as src:
            if not stat.S_ISREG(os.fstat(src.fileno()).st_mode):
                raise CopyError(f"Not a file: {source}", source)
            data = src.read()
    except OSError as e:
        raise CopyError(f"Unable to read {source}: {e}", source) from e

    try:
        with open(target, "wb") as dst:
            dst.write(data)
    except OSError as e:
        try:
            target.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_error:
            logger.warning("Failed to remove partial copy %s: %s", target, cleanup_error)
        raise CopyError(f"Unable to copy {source} -> {target}: {e}", target) from e

    return len(data)


class FileManager:
    """Builds dated destination paths and performs copies under one root."""

    def __init__(self, output_root: Path):
        """Initialize file manager.

        Args:
            output_root: Root directory for output.
        """
        self._output_root = output_root

    def destination_for(self, source: Path, mtime_ns: int) -> Path:
        """Get the dated target path for a source file.

        Uses the UTC date of the modification time and keeps the original
        filename.
        """
        return build_destination(self._output_root, timestamp_to_utc(mtime_ns), source.name)

    def ensure_parent(self, target: Path) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(f"Unable to create {target.parent}: {e}", target.parent) from e

    def copy(self, source: Path, target: Path) -> int:
        size = copy_file(source, target)
        logger.debug("Copied %d bytes %s -> %s", size, source, target)
        return size

    def set_mtime(self, target: Path, mtime_ns: int) -> None:
        """Set both access and modification time. Raises OSError."""
        os.utime(target, ns=(mtime_ns, mtime_ns))
