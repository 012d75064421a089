"""
Auxiliary output channels for stream forwarding.

A written event can be echoed to the error channel or the verbose channel.
Both are plain loggers so the CLI's logging setup decides where they go.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from enum import Enum
from typing import Dict, Optional

from evlog.models import EntryType

ERROR_LOGGER = "evlog.stream.error"
VERBOSE_LOGGER = "evlog.stream.verbose"


class Forwarding(Enum):
    """Where a written event is forwarded when streaming is on."""

    ERROR = "error"
    VERBOSE = "verbose"
    NONE = "none"


# Warning and the audit types are not forwarded.
# TODO: confirm with product owners whether they should reach a channel.
FORWARDING_POLICY: Dict[EntryType, Forwarding] = {
    EntryType.Error: Forwarding.ERROR,
    EntryType.Warning: Forwarding.NONE,
    EntryType.Information: Forwarding.VERBOSE,
    EntryType.SuccessAudit: Forwarding.NONE,
    EntryType.FailureAudit: Forwarding.NONE,
}


class ForwardingChannels:
    """Error and verbose channels backed by the logging module."""

    def __init__(
        self,
        error_logger: Optional[logging.Logger] = None,
        verbose_logger: Optional[logging.Logger] = None,
    ):
        self.error_logger = error_logger or logging.getLogger(ERROR_LOGGER)
        self.verbose_logger = verbose_logger or logging.getLogger(VERBOSE_LOGGER)

    def error(self, message: str, event_id: int) -> None:
        """Report message on the error channel, tagged with its event id."""
        self.error_logger.error(f"[{event_id}] {message}", extra={"event_id": event_id})

    def verbose(self, message: str) -> None:
        """Report message on the verbose channel (DEBUG level)."""
        self.verbose_logger.debug(message)

    def forward(self, entry_type: EntryType, message: str, event_id: int) -> Forwarding:
        """
        Apply FORWARDING_POLICY for one written event.

        Args:
            entry_type: Entry type the event was written with
            message: Event message
            event_id: Event id, used to tag the error channel

        Returns:
            The forwarding that was applied
        """
        target = FORWARDING_POLICY[entry_type]
        if target is Forwarding.ERROR:
            self.error(message, event_id)
        elif target is Forwarding.VERBOSE:
            self.verbose(message)
        return target
