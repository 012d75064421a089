"""
Query command for evlog.

Lists events matching the given filters as a table or JSON lines.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import itertools
import json
import logging
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.table import Table

from evlog.commands._host import get_host, get_settings
from evlog.errors import EventLogError, ValidationError
from evlog.models import EventRecord
from evlog.query import query_events

app = typer.Typer(help="Query written events")
console = Console()
logger = logging.getLogger(__name__)


def _print_table(records: Iterable[EventRecord]) -> int:
    """Render records with rich, return how many were shown."""
    table = Table(show_header=True, header_style="bold", show_lines=False)
    table.add_column("time", no_wrap=True)
    table.add_column("level")
    table.add_column("id", justify="right")
    table.add_column("provider")
    table.add_column("message")

    count = 0
    for record in records:
        stamp = record.timestamp.strftime("%Y-%m-%d %H:%M:%S") if record.timestamp else "-"
        table.add_row(
            stamp,
            record.entry_type or str(record.level if record.level is not None else "-"),
            str(record.event_id),
            record.provider_name,
            record.message,
        )
        count += 1

    if count == 0:
        console.print("[dim]No events found[/dim]")
        return 0

    console.print(f"\n[bold green]{count}[/bold green] events:")
    console.print(table)
    return count


@app.callback(invoke_without_command=True)
def query_command(
    ctx: typer.Context,
    entrytype: Optional[str] = typer.Option(
        None, "--entrytype", "-t", help="Error, Warning or Information"
    ),
    event_id: Optional[int] = typer.Option(None, "--event-id", "-i", help="Event id"),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="Provider (source) name"),
    log: Optional[str] = typer.Option(None, "--log", "-l", help="Log name"),
    computer: Optional[str] = typer.Option(
        None, "--computer", help="Remote computer to query (no timeout)"
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show at most N events"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per event"),
):
    """Query events from the log.

    Examples:
        evlog query
        evlog query -t Error -i 65534
        evlog query --computer SRV01 --json
    """
    settings = get_settings(ctx)

    try:
        records = query_events(
            get_host(ctx),
            entrytype=entrytype,
            event_id=event_id,
            provider_name=provider or settings.source,
            log_name=log or settings.log,
            computer_name=computer,
        )
        if limit is not None:
            records = itertools.islice(records, limit)

        if as_json:
            for record in records:
                typer.echo(json.dumps(record.to_dict()))
        else:
            _print_table(records)

    except ValidationError as e:
        typer.echo(f"Error: Invalid argument {e}", err=True)
        raise typer.Exit(1)
    except EventLogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Event query failed")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
