"""Shared helpers for evlog subcommands."""

import typer

from evlog.config import EventLogSettings
from evlog.hosts import HostEventLog, open_host


def get_settings(ctx: typer.Context) -> EventLogSettings:
    """Get resolved settings from the parent context."""
    if ctx.obj and "settings" in ctx.obj:
        return ctx.obj["settings"]
    return EventLogSettings()


def get_host(ctx: typer.Context) -> HostEventLog:
    """Open the host event log selected by the settings."""
    return open_host(get_settings(ctx))
