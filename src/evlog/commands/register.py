"""
Register command for evlog.

Creates the application's event source. Safe to run on every startup.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from typing import Optional

import typer

from evlog.commands._host import get_host, get_settings
from evlog.errors import RegistrationError
from evlog.registrar import register_source

app = typer.Typer(help="Register the event source under a log")
logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def register_command(
    ctx: typer.Context,
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Source name"),
    log: Optional[str] = typer.Option(None, "--log", "-l", help="Log name"),
):
    """Ensure the event source exists under the log.

    Creating a source usually needs an elevated (administrator) shell.

    Examples:
        evlog register
        evlog register --source myService --log Application
    """
    settings = get_settings(ctx)
    source = source or settings.source
    log = log or settings.log

    try:
        created = register_source(get_host(ctx), source=source, log=log)
    except RegistrationError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Creating an event source may require an elevated shell.", err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Source registration failed")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if created:
        typer.echo(f"✓ Registered source '{source}' in log '{log}'")
    else:
        typer.echo(f"Source '{source}' already exists in log '{log}'")
