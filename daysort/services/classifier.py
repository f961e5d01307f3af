"""Extension-based file classification."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..core.config import ExtensionRules
from ..core.models import FileClass


def extension_of(path: Union[Path, str]) -> Optional[str]:
    """Return the lower-cased extension without the dot, or None.

    Follows pathlib suffix rules: ``photo.JPG`` -> ``jpg``, ``README`` and
    ``.bashrc`` have no extension.
    """
    suffix = Path(path).suffix
    if not suffix:
        return None
    return suffix[1:].lower()


def classify_extension(ext: Optional[str], rules: ExtensionRules) -> FileClass:
    """Classify an extension against the configured tables."""
    if not ext:
        return FileClass.NO_EXTENSION
    ext = ext.lstrip(".").lower()
    if ext in rules.image_extensions:
        return FileClass.IMAGE
    if ext in rules.other_extensions:
        return FileClass.KNOWN_OTHER
    return FileClass.UNKNOWN


def classify(path: Union[Path, str], rules: ExtensionRules) -> FileClass:
    """Classify a file by name."""
    return classify_extension(extension_of(path), rules)
