"""Core domain models and protocols."""
from .protocols import ProgressReporter, FileOperations
from .models import Action, FileClass, FileEntry, OrganizeEvent, RunStats
from .config import ExtensionRules, OrganizerConfig, RulesFile, prepare_destination
from .errors import (
    OrganizeError,
    SourceNotFoundError,
    DestinationError,
    DirectoryListingError,
    DirectoryCreateError,
    CopyError,
    RulesFileError,
)

__all__ = [
    # Protocols
    "ProgressReporter",
    "FileOperations",
    # Models
    "Action",
    "FileClass",
    "FileEntry",
    "OrganizeEvent",
    "RunStats",
    # Config
    "ExtensionRules",
    "OrganizerConfig",
    "RulesFile",
    "prepare_destination",
    # Errors
    "OrganizeError",
    "SourceNotFoundError",
    "DestinationError",
    "DirectoryListingError",
    "DirectoryCreateError",
    "CopyError",
    "RulesFileError",
]
