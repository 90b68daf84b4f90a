"""CLI package for wildpaths.

This package contains the Typer application and all subcommands.
"""

from wildpaths.cli.main import app

__all__ = ["app"]
