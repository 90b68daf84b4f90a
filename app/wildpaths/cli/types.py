"""Shared types and helpers for CLI commands.

This module provides the enums and helpers used across several CLI
command modules: output formats, access to the loaded scan options,
and collection of pipe-delimited scan specs.
"""

import json
from enum import Enum

import typer
from rich.markup import escape
from rich.table import Table

from wildpaths.patterns.errors import WildpathsError
from wildpaths.patterns.options import ScanOptions
from wildpaths.paths.collection import PathSet
from wildpaths.paths.models import PathActionResult
from wildpaths.utils.formatting import (
    console,
    create_path_table,
    format_path_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)


class OutputFormat(str, Enum):
    """Output format options for collected paths."""

    TABLE = "table"
    JSON = "json"
    PLAIN = "plain"


def get_scan_options(ctx: typer.Context) -> ScanOptions:
    """Return the scan options loaded by the main callback.

    Args:
        ctx: Typer context of the running command.

    Returns:
        ScanOptions from the configuration, or defaults.
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        options = obj.get("options")
        if isinstance(options, ScanOptions):
            return options
    return ScanOptions()


def is_quiet(ctx: typer.Context) -> bool:
    """Whether --quiet was given."""
    obj = ctx.find_root().obj
    return isinstance(obj, dict) and bool(obj.get("quiet"))


def collect_specs(specs: list[str], options: ScanOptions) -> PathSet:
    """Collect paths for pipe-delimited ``"dir|pattern|..."`` specs.

    Args:
        specs: Scan specs, one per root.
        options: Scan options.

    Returns:
        PathSet merging the matches of every spec, in spec order.

    Raises:
        typer.Exit: If a spec cannot be scanned.
    """
    paths = PathSet()
    for spec in specs:
        try:
            paths = paths.piped(spec, options=options)
        except WildpathsError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    return paths


def print_paths(
    paths: PathSet,
    output_format: OutputFormat,
    absolute: bool = False,
    quiet: bool = False,
) -> None:
    """Display collected paths in the requested format.

    Args:
        paths: Paths to display.
        output_format: Table, JSON or plain lines.
        absolute: Show absolute paths instead of relative names.
        quiet: Suppress the summary line.
    """
    if output_format == OutputFormat.JSON:
        data = [
            {
                "root": e.root,
                "name": e.name,
                "absolute": e.absolute,
                "type": "directory" if e.is_dir() else "file",
            }
            for e in paths.entries
        ]
        console.print_json(json.dumps(data))
        return

    if output_format == OutputFormat.PLAIN:
        for line in paths.absolute_paths() if absolute else paths.relative_paths():
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        return

    if not paths:
        print_info("No paths matched.")
        return

    table = create_path_table(absolute=absolute)
    for entry in paths.entries:
        table.add_row(*format_path_row(entry, absolute=absolute))
    console.print(table)
    if not quiet:
        console.print(f"\n[dim]Collected {len(paths)} path(s)[/dim]")


def print_action_results(
    results: tuple[PathActionResult, ...],
    title: str,
    done_label: str,
) -> None:
    """Display per-entry results of a bulk operation.

    Args:
        results: Results to display.
        title: Table title.
        done_label: Status label for successful entries (e.g. "deleted").
    """
    if not results:
        print_info("Nothing to do.")
        return

    table = Table(title=title, show_lines=False, header_style="bold_header", border_style="border")
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = f"Would be {done_label}"
        elif r.success:
            status = f"[success]{done_label}[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = escape(r.error or "Unknown error")
        table.add_row(escape(r.path), status, detail)

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} path(s) would be {done_label}.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} path(s) {done_label}.")
