"""Utility modules for wildpaths.

This module exports commonly used utility functions.
"""

from wildpaths.utils.formatting import (
    console,
    create_path_table,
    enable_verbose_logging,
    err_console,
    format_path_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_path_table",
    "enable_verbose_logging",
    "err_console",
    "format_path_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
