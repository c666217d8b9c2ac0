"""Utility modules for ZoneManifest."""

from .logging import (
    get_console,
    get_logger,
    print_error,
    print_info,
    print_success,
    print_warning,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "get_console",
    "print_success",
    "print_error",
    "print_info",
    "print_warning",
]
