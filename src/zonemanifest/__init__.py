"""
ZoneManifest - asset manifest generator for zonetool zone folders.

Walks a zone folder and maps every asset file to a packaging type and a
normalized reference path, written out as a "type,path" CSV manifest.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .classifier import AssetClassifier, ClassificationResult, classify, classify_and_format
from .manifest import ManifestGenerator, ManifestResult
from .scanner import ZoneFolderScanner, is_valid_map_file, should_skip_file
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    # Classifier
    "AssetClassifier",
    "ClassificationResult",
    "classify",
    "classify_and_format",
    # Scanner
    "ZoneFolderScanner",
    "should_skip_file",
    "is_valid_map_file",
    # Manifest
    "ManifestGenerator",
    "ManifestResult",
]
