"""Tests for the zone folder scanner."""

from pathlib import Path

import pytest

from zonemanifest.scanner import CollectResult, ZoneFolderScanner


def touch(path: Path, content: str = ""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


class TestCollectResult:
    """Tests for CollectResult."""

    def test_total_found(self, tmp_path):
        """Test total counts kept and skipped files."""
        result = CollectResult(zone_dir=tmp_path, files=[tmp_path / "a"], skipped=2)
        assert result.total_found == 3


class TestZoneFolderScanner:
    """Tests for ZoneFolderScanner."""

    @pytest.fixture
    def zonetool(self, tmp_path):
        """Create a zonetool directory with a few zones."""
        root = tmp_path / "zonetool"
        (root / "common").mkdir(parents=True, exist_ok=True)
        (root / "mp_crash").mkdir(exist_ok=True)
        (root / "mp_backlot").mkdir(exist_ok=True)
        touch(root / "readme.txt", "not a zone")
        return root

    @pytest.fixture
    def zone(self, tmp_path):
        """Create a zone folder with assorted assets."""
        zone = tmp_path / "zonetool" / "mp_crash"
        touch(zone / "mod.csv")
        touch(zone / "materials" / "wall.json", "{}")
        touch(zone / "techsets" / "wall.cbi")
        touch(zone / "techsets" / "ps" / "wall.cso")
        touch(zone / "maps" / "mp" / "mp_crash.gsc")
        touch(zone / "maps" / "mp" / "mp_crash.d3dbsp")
        touch(zone / "sounds" / "ambient.json", "{}")
        touch(zone / "effects" / "fire.fxe")
        return zone

    @pytest.fixture
    def scanner(self):
        return ZoneFolderScanner()

    def test_default_prefix(self, scanner):
        """Test the default map folder prefix."""
        assert scanner.map_folder_prefix == "mp_"

    def test_find_zone_folders_normal(self, scanner, zonetool):
        """Test normal mode lists every subdirectory, sorted."""
        names = [f.name for f in scanner.find_zone_folders(zonetool)]
        assert names == ["common", "mp_backlot", "mp_crash"]

    def test_find_zone_folders_map(self, scanner, zonetool):
        """Test map mode only lists map zone folders."""
        names = [f.name for f in scanner.find_zone_folders(zonetool, map_mode=True)]
        assert names == ["mp_backlot", "mp_crash"]

    def test_find_zone_folders_custom_prefix(self, zonetool):
        """Test a custom map prefix."""
        scanner = ZoneFolderScanner(map_folder_prefix="common")
        names = [f.name for f in scanner.find_zone_folders(zonetool, map_mode=True)]
        assert names == ["common"]

    def test_find_zone_folders_empty(self, scanner, tmp_path):
        """Test an empty directory has no zones."""
        assert scanner.find_zone_folders(tmp_path) == []

    def test_has_techsets(self, scanner, zone, zonetool):
        """Test techsets detection."""
        assert scanner.has_techsets(zone) is True
        assert scanner.has_techsets(zonetool / "common") is False

    def test_collect_files_normal(self, scanner, zone):
        """Test normal collection keeps everything but d3dbsp."""
        result = scanner.collect_files(zone)

        rel = {f.relative_to(zone).as_posix() for f in result.files}
        assert rel == {
            "mod.csv",
            "materials/wall.json",
            "techsets/wall.cbi",
            "techsets/ps/wall.cso",
            "maps/mp/mp_crash.gsc",
            "sounds/ambient.json",
            "effects/fire.fxe",
        }
        assert result.skipped == 1
        assert result.zone_dir == zone

    def test_collect_files_sorted(self, scanner, zone):
        """Test collected files are sorted."""
        result = scanner.collect_files(zone)
        assert result.files == sorted(result.files)

    def test_collect_files_skip_techsets(self, scanner, zone):
        """Test techsets files are left out on request."""
        result = scanner.collect_files(zone, skip_techsets=True)

        rel = {f.relative_to(zone).as_posix() for f in result.files}
        assert not any(r.startswith("techsets/") for r in rel)
        assert "materials/wall.json" in rel
        assert result.skipped == 3

    def test_collect_files_map_mode(self, scanner, zone):
        """Test map mode only keeps map file kinds."""
        result = scanner.collect_files(zone, map_mode=True)

        rel = {f.relative_to(zone).as_posix() for f in result.files}
        assert rel == {
            "maps/mp/mp_crash.gsc",
            "sounds/ambient.json",
            "effects/fire.fxe",
        }
        assert result.skipped == 5

    def test_collect_files_ignores_directories(self, scanner, tmp_path):
        """Test empty folders produce no entries."""
        zone = tmp_path / "zone"
        (zone / "materials" / "empty").mkdir(parents=True)
        result = scanner.collect_files(zone)
        assert result.files == []
        assert result.skipped == 0
