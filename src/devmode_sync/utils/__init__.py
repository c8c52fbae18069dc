"""Utility helpers for devmode-sync."""

from devmode_sync.utils.console import (
    get_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from devmode_sync.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "get_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
