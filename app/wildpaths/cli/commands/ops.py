"""Bulk operation commands.

Provides the copy, delete and zip commands. Each collects paths from
pipe-delimited scan specs, then processes every path independently and
exits with code 1 if any path failed.
"""

from pathlib import Path
from typing import Annotated

import typer

from wildpaths.cli.types import (
    OutputFormat,
    collect_specs,
    get_scan_options,
    print_action_results,
    print_paths,
)
from wildpaths.paths.operator import OperationReport, PathOperator
from wildpaths.utils.formatting import print_info

SpecsArgument = Annotated[
    list[str],
    typer.Argument(help='Scan specs of the form "dir|pattern|pattern".'),
]
DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", help="Show what would be done."),
]


def copy_paths(
    ctx: typer.Context,
    specs: SpecsArgument,
    dest: Annotated[
        Path,
        typer.Option("--to", "-t", help="Destination directory."),
    ],
    dry_run: DryRunOption = False,
) -> None:
    """Copy collected paths to a directory, keeping their relative layout."""
    paths = collect_specs(specs, get_scan_options(ctx))
    if not paths:
        print_info("No paths matched.")
        return

    report = PathOperator(dry_run=dry_run).copy_to(paths, dest)
    print_action_results(report.results, "Copy Results", "copied")
    _exit_on_failure(report)


def delete_paths(
    ctx: typer.Context,
    specs: SpecsArgument,
    dry_run: DryRunOption = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete collected paths, deepest first."""
    paths = collect_specs(specs, get_scan_options(ctx))
    if not paths:
        print_info("No paths matched.")
        return

    print_paths(paths, OutputFormat.TABLE, absolute=True, quiet=True)

    # Confirm unless --yes or --dry-run
    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {len(paths)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    report = PathOperator(dry_run=dry_run).delete(paths)
    print_action_results(report.results, "Deletion Results", "deleted")
    _exit_on_failure(report)


def zip_paths(
    ctx: typer.Context,
    specs: SpecsArgument,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Zip file to create."),
    ],
    dry_run: DryRunOption = False,
) -> None:
    """Archive collected files into a zip file, keeping their relative names."""
    paths = collect_specs(specs, get_scan_options(ctx))
    report = PathOperator(dry_run=dry_run).zip(paths, output)
    if not report.results:
        print_info(f"No files matched, archive not created: {output}")
        return

    print_action_results(report.results, "Archive Results", "archived")
    _exit_on_failure(report)


def _exit_on_failure(report: OperationReport) -> None:
    """Exit with code 1 if any entry failed."""
    if not report.success:
        raise typer.Exit(code=1)
