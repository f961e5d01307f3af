"""Copy media files into a destination tree organized by date.

Sources are walked recursively, files are classified by extension and media
files land in ``destination/YYYY/MM/DD/filename``.
"""

__version__ = "1.0.0"

# Core exports
from .core.config import ExtensionRules, OrganizerConfig, RulesFile, prepare_destination
from .core.models import Action, FileClass, FileEntry, OrganizeEvent, RunStats
from .core.errors import OrganizeError
from .core.protocols import ProgressReporter, FileOperations

# Service exports
from .services.classifier import classify, extension_of
from .services.file_ops import FileManager, copy_file
from .services.organizer import Organizer

# Logging exports
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter

__all__ = [
    # Core
    "ExtensionRules",
    "OrganizerConfig",
    "RulesFile",
    "prepare_destination",
    "Action",
    "FileClass",
    "FileEntry",
    "OrganizeEvent",
    "RunStats",
    "OrganizeError",
    "ProgressReporter",
    "FileOperations",
    # Services
    "classify",
    "extension_of",
    "FileManager",
    "copy_file",
    "Organizer",
    # Logging
    "RichProgressReporter",
    "QuietProgressReporter",
]
