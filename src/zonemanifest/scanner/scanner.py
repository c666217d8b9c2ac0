"""Zone folder discovery and file collection under a zonetool directory."""

from dataclasses import dataclass, field
from pathlib import Path

from ..utils.logging import get_logger
from .filters import is_valid_map_file, should_skip_file

logger = get_logger(__name__)

TECHSETS_FOLDER = "techsets"


@dataclass
class CollectResult:
    """Files gathered from a zone folder."""

    zone_dir: Path
    files: list[Path] = field(default_factory=list)
    skipped: int = 0

    @property
    def total_found(self) -> int:
        """Number of regular files seen before filtering."""
        return len(self.files) + self.skipped


class ZoneFolderScanner:
    """
    Finds zone folders in a zonetool directory and collects their files.

    Map manifests are only offered for folders carrying the map prefix
    (mp_ by default) and only keep map-relevant file kinds.
    """

    def __init__(self, map_folder_prefix: str = "mp_"):
        """
        Initialize the zone scanner.

        Args:
            map_folder_prefix: Name prefix identifying map zone folders
        """
        self.map_folder_prefix = map_folder_prefix

    def find_zone_folders(self, zonetool_dir: Path, map_mode: bool = False) -> list[Path]:
        """
        List candidate zone folders.

        Args:
            zonetool_dir: Directory holding one folder per zone
            map_mode: Only return map zone folders

        Returns:
            Sorted list of zone folder paths
        """
        zonetool_dir = Path(zonetool_dir)
        folders: list[Path] = []

        for child in sorted(zonetool_dir.iterdir()):
            if not child.is_dir():
                continue
            if map_mode and not child.name.startswith(self.map_folder_prefix):
                continue
            folders.append(child)

        logger.debug(
            f"Found {len(folders)} zone folder(s) in {zonetool_dir} "
            f"({'map' if map_mode else 'normal'} mode)"
        )
        return folders

    @staticmethod
    def has_techsets(zone_dir: Path) -> bool:
        """Check if a zone folder has a techsets folder."""
        return (Path(zone_dir) / TECHSETS_FOLDER).exists()

    @staticmethod
    def _in_techsets(zone_dir: Path, path: Path) -> bool:
        return TECHSETS_FOLDER in path.relative_to(zone_dir).parts

    def collect_files(
        self,
        zone_dir: Path,
        skip_techsets: bool = False,
        map_mode: bool = False,
    ) -> CollectResult:
        """
        Collect the files of a zone folder that belong in its manifest.

        Args:
            zone_dir: Zone folder to scan recursively
            skip_techsets: Leave out everything below a techsets folder
            map_mode: Only keep files valid for a map manifest

        Returns:
            CollectResult with sorted file paths and the number left out
        """
        zone_dir = Path(zone_dir)
        result = CollectResult(zone_dir=zone_dir)

        for path in sorted(zone_dir.rglob("*")):
            if not path.is_file():
                continue
            if skip_techsets and self._in_techsets(zone_dir, path):
                result.skipped += 1
                continue
            if should_skip_file(path):
                result.skipped += 1
                continue
            if map_mode and not is_valid_map_file(path):
                result.skipped += 1
                continue
            result.files.append(path)

        logger.info(
            f"Collected {len(result.files)} file(s) from {zone_dir.name} "
            f"({result.skipped} skipped)"
        )
        return result
