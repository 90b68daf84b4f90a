"""Configuration commands.

Provides commands to show the effective configuration and to write a
default configuration file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from wildpaths.core.config import ConfigError, WildpathsConfig, config_to_dict, save_config
from wildpaths.core.paths import get_config_path
from wildpaths.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize the configuration file.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Return the config path given with --config, or the default path."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and obj.get("config_path") is not None:
        return Path(obj["config_path"])
    return get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration as TOML."""
    obj = ctx.find_root().obj
    config = WildpathsConfig()
    if isinstance(obj, dict) and isinstance(obj.get("config"), WildpathsConfig):
        config = obj["config"]

    path = _config_path(ctx)
    if path.exists():
        print_info(f"Configuration file: {path}")
    else:
        print_info(f"Showing defaults, no configuration file at {path}")
    console.print(escape(tomli_w.dumps(config_to_dict(config))), highlight=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Write a configuration file with the default settings."""
    path = _config_path(ctx)
    if path.exists() and not force:
        print_error(f"Configuration file already exists: {path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(WildpathsConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {saved}")
