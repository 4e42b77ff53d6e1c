"""Utility modules for empd.

This module exports commonly used utility functions.
"""

from empd.utils.formatting import (
    console,
    err_console,
    format_count,
    print_error,
)

__all__ = [
    "console",
    "err_console",
    "format_count",
    "print_error",
]
