# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Host event log port.

The storage engine belongs to the host platform. evlog only needs these four
primitives from it.
"""

from typing import Iterator, Optional, Protocol

from evlog.models import EventFilter, EventRecord, WriteRequest


class HostEventLog(Protocol):
    """Primitives the host event log must provide."""

    def exists(self, source: str, log: str) -> bool:
        """Return True if source is registered under log."""
        ...

    def create(self, log: str, source: str) -> None:
        """Register source under log. Fails if the caller lacks rights."""
        ...

    def query(
        self, criteria: EventFilter, computer_name: Optional[str] = None
    ) -> Iterator[EventRecord]:
        """Yield records matching criteria, lazily, in host order."""
        ...

    def write(self, request: WriteRequest) -> None:
        """Write one event. Fails if the source is not registered."""
        ...
