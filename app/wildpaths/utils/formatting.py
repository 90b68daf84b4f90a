"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from wildpaths.core.theme import get_theme
from wildpaths.paths.models import PathEntry


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def enable_verbose_logging() -> None:
    """Route wildpaths log records to stderr through Rich at DEBUG level."""
    logger = logging.getLogger("wildpaths")
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def create_path_table(title: str = "Collected Paths", absolute: bool = False) -> Table:
    """Create a pre-configured table for displaying collected paths.

    Args:
        title: Table title.
        absolute: Whether the path column holds absolute paths.

    Returns:
        Rich Table configured for path display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Type", width=4, justify="center")
    table.add_column("Path" if absolute else "Relative path", no_wrap=True)
    table.add_column("Root", style="muted")
    return table


def format_path_row(entry: PathEntry, absolute: bool = False) -> tuple[str, str, str]:
    """Format an entry as a table row with proper styling.

    Args:
        entry: Entry to format.
        absolute: Show the absolute path instead of the relative name.

    Returns:
        Tuple of (kind, path, root) with Rich markup.
    """
    shown = escape(entry.absolute if absolute else entry.name)
    if entry.is_dir():
        return ("[directory]dir[/]", f"[directory]{shown}/[/]", escape(entry.root))
    return ("[file]file[/]", f"[file]{shown}[/]", escape(entry.root))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
