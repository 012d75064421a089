"""
Main CLI entry point for evlog.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from typing import Optional

import typer
import yaml

from evlog import __version__
from evlog.commands import config, query, register, write
from evlog.config import get_settings, load_config

# Initialize main app
app = typer.Typer(
    name="evlog",
    help="Register event sources, query and write host event log entries",
    no_args_is_help=True,
)

# Add subcommands
app.add_typer(register.app, name="register")
app.add_typer(query.app, name="query")
app.add_typer(write.app, name="write")
app.add_typer(config.app, name="config")


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.evlog.yml or ./evlog.yml)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (also shows verbose stream forwarding)",
    ),
):
    """
    evlog: host-local facade over the platform event log.

    Registers an application's event source, queries written events, and
    writes new events with validated severity, id and message.
    """
    setup_logging(verbose)

    state = {"config": {}, "settings": get_settings({}), "verbose": verbose}

    if ctx.invoked_subcommand and ctx.invoked_subcommand != "version":
        try:
            cfg = load_config(config_path)
        except FileNotFoundError as e:
            typer.echo(f"Error: Config file not found: {e}", err=True)
            raise typer.Exit(1)
        except yaml.YAMLError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

        state["config"] = cfg
        state["settings"] = get_settings(cfg)
        if verbose:
            logging.debug(f"Loaded config from: {config_path or 'default location'}")
            logging.debug(f"Settings: {state['settings']}")

    # Store state in context for subcommands
    ctx.obj = state


@app.command()
def version():
    """Show version information."""
    typer.echo(f"evlog version {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
