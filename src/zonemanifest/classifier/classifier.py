"""Classifier turning zone file paths into manifest (type, reference path) entries."""

from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath

from ..utils.logging import get_logger
from .rules import DEFAULT_TYPE, match_rule, root_type_for

logger = get_logger(__name__)

MAPS_PREFIX = "maps/"


@dataclass(frozen=True)
class ClassificationResult:
    """Result of classifying a single zone file."""

    type: str
    reference_path: str

    def to_line(self) -> str:
        """Format as a manifest line (no quoting)."""
        return f"{self.type},{self.reference_path}"


def relative_posix(base_dir: str | PurePath, file_path: str | PurePath) -> str:
    """
    Get a file's path relative to a base directory with forward slashes.

    Raises:
        ValueError: If file_path does not lie under base_dir
    """
    rel_path = PurePath(file_path).relative_to(PurePath(base_dir))
    return str(rel_path).replace("\\", "/")


def classify(
    base_dir: str | PurePath,
    file_path: str | PurePath,
    map_mode: bool = False,
) -> ClassificationResult:
    """
    Classify a file that lives somewhere below a zone folder.

    Args:
        base_dir: The zone folder the manifest is generated for
        file_path: Path of the file, under base_dir
        map_mode: Whether a map manifest is being generated

    Returns:
        ClassificationResult with the asset type and reference path
    """
    rel = relative_posix(base_dir, file_path)
    depth = rel.count("/")

    rel_posix = PurePosixPath(rel)
    filename = rel_posix.name
    stem = rel_posix.stem
    ext = rel_posix.suffix[1:].lower()

    # Map scripts keep their full relative path, extension included
    if map_mode and depth >= 1 and rel.startswith(MAPS_PREFIX) and ext == "gsc":
        return ClassificationResult(DEFAULT_TYPE, rel)

    if depth == 0:
        return ClassificationResult(root_type_for(ext), stem)

    rule = match_rule(rel, filename)
    if rule is not None:
        if rule.force_full_path or depth >= 2:
            out_path = f"{rel_posix.parent.as_posix()}/{stem}"
        else:
            out_path = stem

        prefix = rule.prefix
        if out_path.startswith(prefix) and len(out_path) > len(prefix):
            out_path = out_path[len(prefix):]

        return ClassificationResult(rule.type, out_path)

    pos = rel.rfind(".")
    no_ext = rel[:pos] if pos != -1 else rel
    return ClassificationResult(DEFAULT_TYPE, no_ext)


def classify_and_format(
    base_dir: str | PurePath,
    file_path: str | PurePath,
    map_mode: bool = False,
) -> str:
    """
    Classify a file and format it as a manifest line.

    Args:
        base_dir: The zone folder the manifest is generated for
        file_path: Path of the file, under base_dir
        map_mode: Whether a map manifest is being generated

    Returns:
        Line of the form "type,referencePath"
    """
    return classify(base_dir, file_path, map_mode).to_line()


class AssetClassifier:
    """
    Classifies the files of one manifest run.

    The map mode is fixed when the classifier is created and applies to
    every file classified with it.
    """

    def __init__(self, map_mode: bool = False):
        """
        Initialize the asset classifier.

        Args:
            map_mode: Whether files are classified for a map manifest
        """
        self.map_mode = map_mode

    def classify(self, base_dir: Path, file_path: Path) -> ClassificationResult:
        """
        Classify a single file.

        Args:
            base_dir: Zone folder being processed
            file_path: File under base_dir

        Returns:
            ClassificationResult for the file
        """
        result = classify(base_dir, file_path, self.map_mode)
        logger.debug(f"Classified {file_path}: {result.to_line()}")
        return result

    def classify_multiple(
        self, base_dir: Path, file_paths: list[Path]
    ) -> list[ClassificationResult]:
        """
        Classify multiple files.

        Args:
            base_dir: Zone folder being processed
            file_paths: Files under base_dir

        Returns:
            List of ClassificationResult objects, in input order
        """
        return [self.classify(base_dir, file_path) for file_path in file_paths]
