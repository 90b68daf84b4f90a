"""CLI commands for wildpaths.

This package contains all subcommand implementations.
"""

from wildpaths.cli.commands import config, ops, search

__all__ = ["config", "ops", "search"]
