"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from wildpaths import __version__
from wildpaths.cli.commands import config, ops, search
from wildpaths.core.config import ConfigError, load_config
from wildpaths.utils.formatting import enable_verbose_logging, print_error

# Create main Typer app
app = typer.Typer(
    name="wildpaths",
    help="Collect file paths with wildcard and regex patterns.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"wildpaths version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file to use instead of the default.",
        ),
    ] = None,
) -> None:
    """wildpaths - Collect file paths with wildcard and regex patterns.

    Scan a directory tree for paths matching include and exclude
    patterns, then list, copy, delete or archive them.
    """
    if verbose:
        enable_verbose_logging()

    try:
        loaded = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = loaded
    ctx.obj["options"] = loaded.scan


# Register commands
app.command(name="glob")(search.glob_paths)
app.command(name="regex")(search.regex_paths)
app.command(name="find")(search.find_paths)
app.command(name="copy")(ops.copy_paths)
app.command(name="delete")(ops.delete_paths)
app.command(name="zip")(ops.zip_paths)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
