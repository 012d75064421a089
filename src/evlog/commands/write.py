"""
Write command for evlog.

Thin wrapper around write_event(). Contains no business logic.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from typing import Optional

import typer

from evlog.commands._host import get_host, get_settings
from evlog.errors import EventLogError, ValidationError
from evlog.writer import write_event

app = typer.Typer(help="Write an event to the log")
logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def write_command(
    ctx: typer.Context,
    entrytype: Optional[str] = typer.Option(
        None,
        "--entrytype",
        "-t",
        help="Error, Warning, Information, SuccessAudit or FailureAudit",
    ),
    event_id: Optional[int] = typer.Option(None, "--event-id", "-i", help="Event id (<= 65535)"),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Event message"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Source name"),
    log: Optional[str] = typer.Option(None, "--log", "-l", help="Log name"),
    stream: bool = typer.Option(
        False,
        "--stream",
        help="Also forward Error events to stderr and Information events to --verbose output",
    ),
):
    """Write a single event.

    Examples:
        evlog write -t Information -i 1000 -m "Service started"
        evlog write -t Error -i 65534 -m "BORKED!" --stream
    """
    settings = get_settings(ctx)

    try:
        write_event(
            get_host(ctx),
            entrytype,
            event_id,
            message,
            source=source or settings.source,
            log=log or settings.log,
            stream=stream,
        )
    except ValidationError as e:
        typer.echo(f"Error: Invalid argument {e}", err=True)
        raise typer.Exit(1)
    except EventLogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Event write failed")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if ctx.obj and ctx.obj.get("verbose"):
        typer.echo(f"✓ Wrote {entrytype} event {event_id}")
