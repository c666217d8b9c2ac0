"""Predicates deciding which zone files reach the classifier."""

from pathlib import PurePath

# Compiled map geometry, never listed in a manifest
SKIPPED_EXTENSIONS = {".d3dbsp"}

# File kinds a map manifest keeps
MAP_EXTENSIONS = {".gsc", ".fxe", ".xmb", ".xsb"}

MAP_SOUND_FOLDER = "sounds"


def should_skip_file(path: PurePath) -> bool:
    """Check if a file is excluded from every manifest."""
    return PurePath(path).suffix in SKIPPED_EXTENSIONS


def is_valid_map_file(path: PurePath) -> bool:
    """
    Check if a file belongs in a map manifest.

    Map manifests keep scripts, effects, models and surfaces, plus sound
    definitions (.json) that sit directly in a "sounds" folder.
    """
    path = PurePath(path)
    ext = path.suffix.lower()

    if ext in MAP_EXTENSIONS:
        return True
    if ext == ".json" and path.parent.name == MAP_SOUND_FOLDER:
        return True
    return False
