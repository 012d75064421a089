"""Event writing with optional stream forwarding.

Implementation rules enforced here:
- Every argument is validated before the host is touched
- The raw data payload is always (10, 20)
- Forwarding happens only after the write, per FORWARDING_POLICY

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from typing import Optional, Union

from evlog.channels import ForwardingChannels
from evlog.errors import ValidationError
from evlog.hosts.base import HostEventLog
from evlog.models import (
    DEFAULT_LOG,
    DEFAULT_SOURCE,
    MAX_EVENT_ID,
    EntryType,
    WriteRequest,
    parse_entry_type,
)

logger = logging.getLogger(__name__)


def validate_write(
    entrytype: Union[str, EntryType, None],
    event_id: Optional[int],
    message: Optional[str],
    source: str = DEFAULT_SOURCE,
    log: str = DEFAULT_LOG,
) -> WriteRequest:
    """Validate write arguments and build the request.

    Raises ValidationError naming the first violated constraint.
    """
    entry_type = parse_entry_type(entrytype)

    if event_id is None:
        raise ValidationError("eventID", "an event id is required")
    if isinstance(event_id, bool) or not isinstance(event_id, int):
        raise ValidationError("eventID", f"must be an integer, got {event_id!r}")
    if event_id > MAX_EVENT_ID:
        raise ValidationError("eventID", f"must be <= {MAX_EVENT_ID}, got {event_id}")

    if not message:
        raise ValidationError("message", "a non-empty message is required")

    return WriteRequest(
        source=source,
        log=log,
        event_id=event_id,
        entry_type=entry_type,
        message=message,
    )


def write_event(
    host: HostEventLog,
    entrytype: Union[str, EntryType, None],
    event_id: Optional[int],
    message: Optional[str],
    source: str = DEFAULT_SOURCE,
    log: str = DEFAULT_LOG,
    stream: bool = False,
    channels: Optional[ForwardingChannels] = None,
) -> None:
    """Write one event and optionally forward its message.

    The source is assumed to be registered already; if it is not, the host's
    error is raised as-is.
    """
    request = validate_write(entrytype, event_id, message, source, log)

    host.write(request)
    logger.debug(
        f"Wrote {request.entry_type.name} event {request.event_id} "
        f"to {request.log}/{request.source}"
    )

    if stream:
        (channels or ForwardingChannels()).forward(
            request.entry_type, request.message, request.event_id
        )
