"""End-to-end runs over real directory trees."""
import os
import pytest
from pathlib import Path

from daysort.core.config import OrganizerConfig, prepare_destination
from daysort.core.models import Action
from daysort.services.organizer import Organizer

from .fixtures import MediaFixture, create_camera_structure, utc


class TestEndToEnd:
    """Full runs from source tree to dated destination."""

    def test_photo_copied_with_mtime(self, tmp_path: Path):
        """src/a/photo.JPG (2 MB, 2022-07-01) lands in dest/2022/07/01."""
        src = tmp_path / "src"
        dest = tmp_path / "dest"
        fixture = MediaFixture(
            name="photo.JPG", folder="a", size=2 * 1024 * 1024, taken=utc(2022, 7, 1)
        )
        src_file = fixture.create(src)

        prepare_destination(dest, create=True)
        organizer = Organizer(OrganizerConfig(destination=dest))
        organizer.organize([src])

        target = dest / "2022" / "07" / "01" / "photo.JPG"
        assert target == fixture.expected_destination(dest)
        assert target.read_bytes() == src_file.read_bytes()
        assert target.stat().st_mtime_ns == src_file.stat().st_mtime_ns
        messages = [e.message for e in organizer.events]
        assert messages == [f"Copy {src_file} {target}"]

    def test_small_photo_not_copied(self, tmp_path: Path):
        """A 500 byte file with min_size 10240 produces one too-small line."""
        src = tmp_path / "src"
        dest = tmp_path / "dest"
        MediaFixture(name="photo.JPG", folder="a", size=500, taken=utc(2022, 7, 1)).create(src)

        prepare_destination(dest, create=True)
        organizer = Organizer(OrganizerConfig(destination=dest, min_size=10240))
        organizer.organize([src])

        assert list(dest.iterdir()) == []
        assert [e.action for e in organizer.events] == [Action.TOO_SMALL]
        assert organizer.events[0].message.startswith("Size is too small")

    def test_camera_card(self, tmp_path: Path):
        src = tmp_path / "card"
        dest = tmp_path / "library"
        fixtures = create_camera_structure(src)

        prepare_destination(dest, create=True)
        organizer = Organizer(OrganizerConfig(destination=dest))
        stats = organizer.organize([src])

        expected = [
            f.expected_destination(dest)
            for f in fixtures
            if f.name in {"IMG_0001.JPG", "IMG_0002.CR2", "clip.mp4"}
        ]
        for path in expected:
            assert path.is_file()
        assert sorted(p for p in dest.rglob("*") if p.is_file()) == sorted(expected)
        assert stats.copied == 3
        assert stats.skipped_dirs == 2
        assert stats.unknown == 1

    @pytest.mark.parametrize("overwrite", [False, True])
    def test_rerun(self, tmp_path: Path, overwrite: bool):
        src = tmp_path / "src"
        dest = tmp_path / "dest"
        dest.mkdir()
        MediaFixture(name="a.jpg").create(src)
        Organizer(OrganizerConfig(destination=dest)).organize([src])

        organizer = Organizer(OrganizerConfig(destination=dest, overwrite=overwrite))
        organizer.organize([src])

        expected = Action.OVERWRITE if overwrite else Action.SKIP_EXISTING
        assert [e.action for e in organizer.events] == [expected]

    def test_last_instant_of_year_keeps_its_date(self, tmp_path: Path):
        src = tmp_path / "src"
        dest = tmp_path / "dest"
        dest.mkdir()
        path = MediaFixture(name="a.jpg").create(src)
        ns = int(utc(2022, 12, 31, 23, 59).timestamp() + 59) * 1_000_000_000 + 999_999_800
        os.utime(path, ns=(ns, ns))

        Organizer(OrganizerConfig(destination=dest)).organize([src])

        target = dest / "2022" / "12" / "31" / "a.jpg"
        assert target.is_file()
        assert target.stat().st_mtime_ns == ns
