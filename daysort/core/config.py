"""Configuration dataclasses with validation."""
from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import DestinationError, RulesFileError


DEFAULT_IMAGE_EXTENSIONS = frozenset({
    "afphoto", "ai", "arw", "awf", "awi", "bmp", "cr2", "crw", "dng", "heic",
    "jpe", "jpeg", "jpg", "mkv", "mov", "mp4", "mrw", "mrw2", "mts", "nef",
    "orf", "pef", "png", "psd", "raf", "rw2", "srw", "tif", "tiff", "x3f",
})

# Sidecar, catalog and misc files that are expected next to media
DEFAULT_OTHER_EXTENSIONS = frozenset({
    "asd", "backup", "backup 1", "cocatalogdb", "comask", "cos", "cue", "db",
    "doc", "exposurex6", "gif", "htm", "ini", "itc", "itdb", "itl", "log",
    "md5", "nfo", "on1", "ovw", "pdf", "pp3", "rtf", "sfv", "spd", "spi",
    "thm", "trashed", "txt", "url", "vbe", "xls", "xml", "xmp",
})

DEFAULT_SKIP_DIRS = frozenset({
    "Cache", "Mobile Applications", "Podcasts", "Previews", "Settings50",
    "Thumbnails", "Thumbs.db", "caches", "com.apple.mediaanalysisd",
    "com.apple.photoanalysisda", "database", "private", "resources",
})

DEFAULT_MIN_SIZE = 10240


def normalize_extensions(values: Iterable[str]) -> frozenset[str]:
    """Lower-case extensions and strip any leading dot."""
    return frozenset(v.strip().lstrip(".").lower() for v in values if v.strip().lstrip("."))


@dataclass(frozen=True, slots=True)
class ExtensionRules:
    """Extension and directory-name tables used for classification and skipping.

    Extensions are stored lower-case without a leading dot. Skip directory
    names are matched exactly.
    """
    image_extensions: frozenset[str] = DEFAULT_IMAGE_EXTENSIONS
    other_extensions: frozenset[str] = DEFAULT_OTHER_EXTENSIONS
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS

    def __post_init__(self) -> None:
        object.__setattr__(self, "image_extensions", normalize_extensions(self.image_extensions))
        object.__setattr__(self, "other_extensions", normalize_extensions(self.other_extensions))
        object.__setattr__(self, "skip_dirs", frozenset(self.skip_dirs))


class RulesFile(BaseModel):
    """JSON rules file. Keys that are present replace the defaults."""
    image_extensions: Optional[list[str]] = Field(
        default=None, description="Extensions treated as media to organize"
    )
    other_extensions: Optional[list[str]] = Field(
        default=None, description="Extensions ignored without a warning"
    )
    skip_dirs: Optional[list[str]] = Field(
        default=None, description="Directory names never descended into"
    )
    min_size: Optional[int] = Field(
        default=None, description="Minimum size in bytes for a media file to be copied"
    )

    @field_validator("min_size")
    @classmethod
    def check_min_size(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("min_size must not be negative")
        return value

    def apply(self, rules: ExtensionRules) -> ExtensionRules:
        overrides = {}
        if self.image_extensions is not None:
            overrides["image_extensions"] = frozenset(self.image_extensions)
        if self.other_extensions is not None:
            overrides["other_extensions"] = frozenset(self.other_extensions)
        if self.skip_dirs is not None:
            overrides["skip_dirs"] = frozenset(self.skip_dirs)
        return replace(rules, **overrides)


def load_rules_file(path: Path) -> RulesFile:
    """Read and validate a JSON rules file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RulesFileError(f"Unable to read rules file {path}: {e}", path) from e
    except json.JSONDecodeError as e:
        raise RulesFileError(f"Rules file {path} is not valid JSON: {e}", path) from e
    try:
        return RulesFile.model_validate(data)
    except ValidationError as e:
        raise RulesFileError(f"Invalid rules file {path}: {e}", path) from e


@dataclass(frozen=True, slots=True)
class OrganizerConfig:
    """Main configuration for an organize run.

    Built once at startup and never mutated. The destination itself is
    checked separately by :func:`prepare_destination`.
    """
    destination: Path
    rules: ExtensionRules = field(default_factory=ExtensionRules)
    min_size: int = DEFAULT_MIN_SIZE
    dry_run: bool = False
    overwrite: bool = False
    follow_symlinks: bool = True

    def __post_init__(self) -> None:
        if self.min_size < 0:
            raise ValueError("min_size must not be negative")

    @property
    def image_extensions(self) -> frozenset[str]:
        return self.rules.image_extensions

    @property
    def other_extensions(self) -> frozenset[str]:
        return self.rules.other_extensions

    @property
    def skip_dirs(self) -> frozenset[str]:
        return self.rules.skip_dirs

    def describe(self) -> dict[str, object]:
        """Settings shown in the run header."""
        return {
            "Destination": str(self.destination),
            "Image Extensions": len(self.image_extensions),
            "Other Extensions": len(self.other_extensions),
            "Skipped Folders": len(self.skip_dirs),
            "Min Size": f"{self.min_size} bytes",
            "Overwrite": self.overwrite,
            "Dry Run": self.dry_run,
        }


def prepare_destination(destination: Path, create: bool, dry_run: bool = False) -> None:
    """Check the destination root before any processing starts.

    Raises DestinationError if it exists but is not a directory, or if it is
    missing and ``create`` is off. In dry-run mode a missing destination is
    accepted (with ``create``) but not created.
    """
    if destination.exists():
        if not destination.is_dir():
            raise DestinationError(f"Destination is not a directory {destination}", destination)
        return

    if not create:
        raise DestinationError(
            f"Destination doesn't exist and create is not enabled {destination}", destination
        )
    if dry_run:
        return
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationError(f"Unable to create {destination}: {e}", destination) from e
