"""Test fixtures for organizer tests.

This module provides fixture classes that write test files to disk with a
given size and modification time, and know where they should end up.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


def utc(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def set_mtime(path: Path, when: datetime) -> int:
    """Set access and modification time of ``path``. Returns the ns value."""
    ns = int(when.timestamp()) * 1_000_000_000
    os.utime(path, ns=(ns, ns))
    return ns


@dataclass
class MediaFixture:
    """A source file with known size, timestamp and expected destination."""
    name: str
    folder: Optional[str] = None
    size: int = 20_000
    taken: datetime = field(default_factory=lambda: utc(2021, 6, 15))
    fill: bytes = b"\xab"

    def create(self, base_path: Path) -> Path:
        folder = base_path / (self.folder or "")
        folder.mkdir(parents=True, exist_ok=True)

        file_path = folder / self.name
        file_path.write_bytes(self.content())
        set_mtime(file_path, self.taken)
        return file_path

    def content(self) -> bytes:
        return (self.fill * self.size)[: self.size]

    def expected_destination(self, destination: Path) -> Path:
        return (
            destination
            / f"{self.taken.year:04d}"
            / f"{self.taken.month:02d}"
            / f"{self.taken.day:02d}"
            / self.name
        )


def create_camera_structure(base_path: Path) -> list[MediaFixture]:
    """Create a camera-card-like tree with media, sidecars and junk folders."""
    fixtures = [
        MediaFixture(name="IMG_0001.JPG", folder="DCIM/100CANON", taken=utc(2022, 7, 1)),
        MediaFixture(name="IMG_0002.CR2", folder="DCIM/100CANON", taken=utc(2022, 7, 2)),
        MediaFixture(name="clip.mp4", folder="DCIM/101CANON", taken=utc(2023, 3, 5)),
        MediaFixture(name="IMG_0001.xmp", folder="DCIM/100CANON", size=100),
        MediaFixture(name="notes.weird", folder="misc", size=100),
        MediaFixture(name="thumb.jpg", folder="Thumbnails", taken=utc(2020, 1, 1)),
        MediaFixture(name="secret.jpg", folder=".hidden", taken=utc(2020, 1, 1)),
    ]
    for fixture in fixtures:
        fixture.create(base_path)
    return fixtures
