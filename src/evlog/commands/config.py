# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Config command for evlog.

Shows the resolved settings and validates the configuration file.
"""

import logging

import typer

from evlog.commands._host import get_settings
from evlog.validation import validate_config

app = typer.Typer(help="Show and validate configuration")
logger = logging.getLogger(__name__)


@app.command()
def show(ctx: typer.Context):
    """
    Show the resolved event log settings.

    Values not set in the config file show their defaults.
    """
    settings = get_settings(ctx)

    typer.echo("Event log settings:")
    typer.echo(f"  source: {settings.source}")
    typer.echo(f"  log:    {settings.log}")
    typer.echo(f"  host:   {settings.host}")
    if settings.host == "file":
        typer.echo(f"  dir:    {settings.dir}")


@app.command()
def validate(ctx: typer.Context):
    """
    Validate configuration structure.

    Reports unknown keys (with suggestions), invalid hosts and empty names.
    """
    config = ctx.obj.get("config", {}) if ctx.obj else {}

    typer.echo("Validating configuration...")
    typer.echo()

    issues = validate_config(config)
    if issues:
        typer.echo("Structure Issues:")
        for issue in issues:
            typer.echo(f"  ⚠️  {issue}")
        raise typer.Exit(1)

    typer.echo("✓ Configuration structure is valid")
