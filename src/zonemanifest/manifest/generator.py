"""Manifest generation for a single zone folder."""

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..classifier import AssetClassifier
from ..scanner import ZoneFolderScanner
from ..utils.logging import get_logger

logger = get_logger(__name__)

MANIFEST_SUFFIX = ".csv"


@dataclass
class ManifestResult:
    """Result of generating a manifest for one zone folder."""

    zone_dir: Path
    output_path: Path
    map_mode: bool = False

    lines: list[str] = field(default_factory=list)
    type_counts: dict[str, int] = field(default_factory=dict)
    skipped: int = 0

    # Status
    success: bool = True
    error_message: str | None = None

    @property
    def entry_count(self) -> int:
        """Number of manifest lines produced."""
        return len(self.lines)


def tally_types(lines: list[str]) -> dict[str, int]:
    """
    Count manifest lines by asset type.

    Args:
        lines: Manifest lines of the form "type,referencePath"

    Returns:
        Mapping of type to number of lines, in first-seen order
    """
    return dict(Counter(line.split(",", 1)[0] for line in lines))


class ManifestGenerator:
    """
    Generates the manifest CSV of a zone folder.

    Pipeline: collect files -> filter -> classify -> write -> tally
    """

    def __init__(
        self,
        output_dir: Path,
        map_mode: bool = False,
        scanner: ZoneFolderScanner | None = None,
    ):
        """
        Initialize the manifest generator.

        Args:
            output_dir: Directory the <zone>.csv files are written to
            map_mode: Generate map manifests instead of normal ones
            scanner: Zone scanner to collect files with
        """
        self.output_dir = Path(output_dir)
        self.map_mode = map_mode
        self.scanner = scanner or ZoneFolderScanner()
        self.classifier = AssetClassifier(map_mode=map_mode)

    def output_path_for(self, zone_dir: Path) -> Path:
        """Get the manifest path for a zone folder."""
        return self.output_dir / f"{Path(zone_dir).name}{MANIFEST_SUFFIX}"

    def generate(
        self,
        zone_dir: Path,
        skip_techsets: bool = False,
        progress_callback: Callable[[int, int, str], None] | None = None,
    ) -> ManifestResult:
        """
        Generate the manifest for a zone folder.

        Args:
            zone_dir: Zone folder to generate the manifest for
            skip_techsets: Leave out files below a techsets folder
            progress_callback: Called as (index, total, line) after each entry

        Returns:
            ManifestResult with the written lines and type counts
        """
        zone_dir = Path(zone_dir)
        output_path = self.output_path_for(zone_dir)
        result = ManifestResult(
            zone_dir=zone_dir,
            output_path=output_path,
            map_mode=self.map_mode,
        )

        collected = self.scanner.collect_files(
            zone_dir, skip_techsets=skip_techsets, map_mode=self.map_mode
        )
        result.skipped = collected.skipped
        total = len(collected.files)

        logger.info(f"Generating '{output_path.name}' ({total} entries)")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="\n") as out:
                for i, file_path in enumerate(collected.files, 1):
                    line = self.classifier.classify(zone_dir, file_path).to_line()
                    out.write(line + "\n")
                    result.lines.append(line)
                    if progress_callback is not None:
                        progress_callback(i, total, line)
        except OSError as e:
            logger.error(f"Failed to write {output_path}: {e}")
            result.success = False
            result.error_message = f"Failed to open {output_path} for writing: {e}"

        result.type_counts = tally_types(result.lines)

        if result.success:
            logger.info(f"CSV generated: {output_path} ({result.entry_count} entries)")

        return result
