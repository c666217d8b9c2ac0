"""Command-line interface for ZoneManifest."""

from .main import cli

__all__ = ["cli"]
