"""Manifest module for writing zone CSV manifests."""

from .generator import ManifestGenerator, ManifestResult, tally_types

__all__ = [
    "ManifestGenerator",
    "ManifestResult",
    "tally_types",
]
