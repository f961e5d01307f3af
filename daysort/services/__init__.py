"""Service layer - classification, file operations and the organizer."""
from .classifier import classify, classify_extension, extension_of
from .file_ops import FileManager, build_destination, copy_file, timestamp_to_utc
from .organizer import Organizer, is_skipped_name

__all__ = [
    "classify",
    "classify_extension",
    "extension_of",
    "FileManager",
    "build_destination",
    "copy_file",
    "timestamp_to_utc",
    "Organizer",
    "is_skipped_name",
]
