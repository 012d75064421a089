"""
Host event log adapters.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

from evlog.errors import EventLogError
from evlog.hosts.base import HostEventLog
from evlog.hosts.file import FileEventLog

__all__ = ["HostEventLog", "FileEventLog", "open_host"]


def open_host(settings) -> HostEventLog:
    """Open the host event log selected by EventLogSettings."""
    if settings.host == "windows":
        # pywin32 is only importable on Windows
        from evlog.hosts.windows import WindowsEventLog

        return WindowsEventLog()
    if settings.host == "file":
        return FileEventLog(settings.dir)
    raise EventLogError(f"Unknown host '{settings.host}'")
