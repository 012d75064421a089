"""Event log queries.

Implementation rules enforced here:
- Only Error, Warning and Information can be selected by entry type
- level and eventID are only sent when supplied
- Host errors propagate unchanged

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from typing import Iterator, Optional, Union

from evlog.errors import ValidationError
from evlog.hosts.base import HostEventLog
from evlog.models import (
    DEFAULT_LOG,
    DEFAULT_SOURCE,
    EntryType,
    EventFilter,
    EventFilterBuilder,
    EventRecord,
    parse_entry_type,
    severity_level,
)

logger = logging.getLogger(__name__)


def build_filter(
    entrytype: Optional[Union[str, EntryType]] = None,
    event_id: Optional[int] = None,
    provider_name: str = DEFAULT_SOURCE,
    log_name: str = DEFAULT_LOG,
) -> EventFilter:
    """Build the filter for a query, validating entrytype first."""
    # Quoted into the XPath selector, which cannot hold both quote kinds
    if "'" in provider_name and '"' in provider_name:
        raise ValidationError("providerName", "cannot contain both ' and \" characters")

    builder = EventFilterBuilder(provider_name=provider_name, log_name=log_name)
    if entrytype is not None:
        builder.with_level(severity_level(parse_entry_type(entrytype)))
    if event_id is not None:
        if isinstance(event_id, bool) or not isinstance(event_id, int):
            raise ValidationError("eventID", f"must be an integer, got {event_id!r}")
        builder.with_event_id(event_id)
    return builder.build()


def query_events(
    host: HostEventLog,
    entrytype: Optional[Union[str, EntryType]] = None,
    event_id: Optional[int] = None,
    provider_name: str = DEFAULT_SOURCE,
    log_name: str = DEFAULT_LOG,
    computer_name: Optional[str] = None,
) -> Iterator[EventRecord]:
    """Query events matching the given options.

    Returns the host's lazy iterator in host order. Remote queries
    (computer_name set) may block on the network without a timeout.
    """
    criteria = build_filter(entrytype, event_id, provider_name, log_name)
    logger.debug(
        f"Querying {computer_name or 'local host'} with {criteria.as_criteria()}"
    )
    return host.query(criteria, computer_name=computer_name)
