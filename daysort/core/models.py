"""Domain models - immutable data classes."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class FileClass(Enum):
    """How a file is classified by its extension."""
    NO_EXTENSION = "no-extension"
    IMAGE = "image"
    KNOWN_OTHER = "known-other"
    UNKNOWN = "unknown"


class Action(Enum):
    """What the organizer decided for a filesystem entry."""
    SKIP_DIR = "skip_dir"
    TOO_SMALL = "too_small"
    COPY = "copy"
    OVERWRITE = "overwrite"
    SKIP_EXISTING = "skip_existing"
    UNKNOWN = "unknown"
    NO_TIMESTAMP = "no_timestamp"
    MTIME_FAILED = "mtime_failed"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A file and the metadata read once when it is visited."""
    path: Path
    size: int
    mtime_ns: int

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True, slots=True)
class OrganizeEvent:
    """A single decision taken during a run."""
    action: Action
    source: Path
    destination: Optional[Path] = None
    detail: Optional[str] = None
    dry_run: bool = False

    @property
    def message(self) -> str:
        match self.action:
            case Action.SKIP_DIR:
                return f"Skip {self.source.name}"
            case Action.TOO_SMALL:
                return f"Size is too small {self.source} {self.detail}"
            case Action.COPY if self.dry_run:
                return f"Would copy {self.source} {self.destination}"
            case Action.OVERWRITE if self.dry_run:
                return f"Would overwrite {self.source} {self.destination}"
            case Action.COPY:
                return f"Copy {self.source} {self.destination}"
            case Action.OVERWRITE:
                return f"Overwrite {self.source} {self.destination}"
            case Action.SKIP_EXISTING:
                return f"Skip {self.source}"
            case Action.UNKNOWN:
                return f"Unknown {self.detail}"
            case Action.NO_TIMESTAMP:
                return f"No timestamp {self.source}: {self.detail}"
            case Action.MTIME_FAILED:
                return f"Error while {self.source} {self.detail}"
        return f"{self.action.value} {self.source}"

    @property
    def is_problem(self) -> bool:
        """Whether the operator should look at this event."""
        return self.action in (Action.UNKNOWN, Action.NO_TIMESTAMP, Action.MTIME_FAILED)


@dataclass(slots=True)
class RunStats:
    """Mutable statistics for an organize run."""
    files_seen: int = 0
    copied: int = 0
    overwritten: int = 0
    skipped_existing: int = 0
    skipped_dirs: int = 0
    too_small: int = 0
    unknown: int = 0
    no_timestamp: int = 0
    mtime_failures: int = 0
    bytes_copied: int = 0
    elapsed_seconds: float = 0.0

    def record(self, event: OrganizeEvent) -> None:
        """Record an organize event."""
        match event.action:
            case Action.SKIP_DIR:
                self.skipped_dirs += 1
            case Action.TOO_SMALL:
                self.too_small += 1
            case Action.COPY:
                self.copied += 1
            case Action.OVERWRITE:
                self.overwritten += 1
            case Action.SKIP_EXISTING:
                self.skipped_existing += 1
            case Action.UNKNOWN:
                self.unknown += 1
            case Action.NO_TIMESTAMP:
                self.no_timestamp += 1
            case Action.MTIME_FAILED:
                self.mtime_failures += 1

    def summary(self) -> dict[str, int]:
        return {
            "files": self.files_seen,
            "copied": self.copied,
            "overwritten": self.overwritten,
            "skipped_existing": self.skipped_existing,
            "skipped_dirs": self.skipped_dirs,
            "too_small": self.too_small,
            "unknown": self.unknown,
            "no_timestamp": self.no_timestamp,
            "mtime_failures": self.mtime_failures,
        }
