"""Exceptions that abort an organize run."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class OrganizeError(Exception):
    """Base class for fatal errors. Carries the offending path."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class SourceNotFoundError(OrganizeError):
    """A source root does not exist."""


class DestinationError(OrganizeError):
    """Destination root is not a directory, or is missing and may not be created."""


class DirectoryListingError(OrganizeError):
    """A directory could not be listed."""


class DirectoryCreateError(OrganizeError):
    """A destination directory could not be created."""


class CopyError(OrganizeError):
    """Reading the source or writing the destination failed."""


class RulesFileError(OrganizeError):
    """The extension rules file is unreadable or invalid."""
