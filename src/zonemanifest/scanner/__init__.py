"""Scanner module for finding zone folders and the files to classify."""

from .filters import is_valid_map_file, should_skip_file
from .scanner import CollectResult, ZoneFolderScanner

__all__ = [
    "ZoneFolderScanner",
    "CollectResult",
    "should_skip_file",
    "is_valid_map_file",
]
