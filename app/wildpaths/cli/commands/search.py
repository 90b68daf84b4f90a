"""Path collection commands.

Provides the glob, regex and find commands, which collect paths and
print them as a table, JSON or plain lines.
"""

from typing import Annotated

import typer

from wildpaths.cli.types import (
    OutputFormat,
    collect_specs,
    get_scan_options,
    is_quiet,
    print_paths,
)
from wildpaths.paths.collection import PathSet
from wildpaths.patterns.errors import WildpathsError
from wildpaths.patterns.models import PatternMode
from wildpaths.utils.formatting import print_error

FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
]
FilesOnlyOption = Annotated[
    bool,
    typer.Option("--files-only", help="Only show files."),
]
DirsOnlyOption = Annotated[
    bool,
    typer.Option("--dirs-only", help="Only show directories."),
]
AbsoluteOption = Annotated[
    bool,
    typer.Option("--absolute", "-a", help="Show absolute paths."),
]


def glob_paths(
    ctx: typer.Context,
    root: Annotated[str, typer.Argument(help="Directory to scan.")],
    patterns: Annotated[
        list[str] | None,
        typer.Argument(help="Wildcard patterns; prefix with ! to exclude. Default: **"),
    ] = None,
    output_format: FormatOption = OutputFormat.TABLE,
    files_only: FilesOnlyOption = False,
    dirs_only: DirsOnlyOption = False,
    absolute: AbsoluteOption = False,
) -> None:
    """Collect paths under ROOT matching wildcard patterns."""
    paths = _scan(ctx, PatternMode.GLOB, root, patterns or [])
    _show(ctx, paths, output_format, files_only, dirs_only, absolute)


def regex_paths(
    ctx: typer.Context,
    root: Annotated[str, typer.Argument(help="Directory to scan.")],
    patterns: Annotated[
        list[str],
        typer.Argument(help="Regular expressions; prefix with ! to exclude."),
    ],
    output_format: FormatOption = OutputFormat.TABLE,
    files_only: FilesOnlyOption = False,
    dirs_only: DirsOnlyOption = False,
    absolute: AbsoluteOption = False,
) -> None:
    """Collect paths under ROOT whose relative path matches a regex."""
    paths = _scan(ctx, PatternMode.REGEX, root, patterns)
    _show(ctx, paths, output_format, files_only, dirs_only, absolute)


def find_paths(
    ctx: typer.Context,
    specs: Annotated[
        list[str],
        typer.Argument(help='Scan specs of the form "dir|pattern|pattern".'),
    ],
    output_format: FormatOption = OutputFormat.TABLE,
    files_only: FilesOnlyOption = False,
    dirs_only: DirsOnlyOption = False,
    absolute: AbsoluteOption = False,
) -> None:
    """Collect paths for one or more pipe-delimited scan specs."""
    paths = collect_specs(specs, get_scan_options(ctx))
    _show(ctx, paths, output_format, files_only, dirs_only, absolute)


# === Private helper functions ===


def _scan(ctx: typer.Context, mode: PatternMode, root: str, patterns: list[str]) -> PathSet:
    """Run one scan, turning scan errors into a CLI error exit."""
    options = get_scan_options(ctx)
    try:
        if mode == PatternMode.REGEX:
            return PathSet.from_regex(root, patterns, options=options)
        return PathSet.from_glob(root, patterns, options=options)
    except WildpathsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _show(
    ctx: typer.Context,
    paths: PathSet,
    output_format: OutputFormat,
    files_only: bool,
    dirs_only: bool,
    absolute: bool,
) -> None:
    """Apply the type filters and print the paths."""
    if files_only and dirs_only:
        print_error("--files-only and --dirs-only are mutually exclusive.")
        raise typer.Exit(code=2)
    if files_only:
        paths = paths.files_only()
    elif dirs_only:
        paths = paths.dirs_only()
    print_paths(paths, output_format, absolute=absolute, quiet=is_quiet(ctx))
