"""
Event log data model.

Severity tables, the write-side request, the read-side record, and the
query filter with its builder.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

from evlog.errors import ValidationError

DEFAULT_SOURCE = "whartonCoreServices"
DEFAULT_LOG = "Application"

# Highest event id the host accepts
MAX_EVENT_ID = 65535

# Fixed payload attached to every written event
RAW_DATA = bytes((10, 20))


class SeverityLevel(IntEnum):
    """Ordered severity table; the value is the event log level."""

    LogAlways = 0
    Critical = 1
    Error = 2
    Warning = 3
    Information = 4
    Verbose = 5


class EntryType(Enum):
    """Entry types accepted when writing an event."""

    Error = "Error"
    Warning = "Warning"
    Information = "Information"
    SuccessAudit = "SuccessAudit"
    FailureAudit = "FailureAudit"


# Only these severities are selectable when querying
QUERYABLE_ENTRY_TYPES = frozenset({
    EntryType.Error,
    EntryType.Warning,
    EntryType.Information,
})


def parse_entry_type(value: Any) -> EntryType:
    """Resolve an entry type name, raising ValidationError if unknown."""
    if isinstance(value, EntryType):
        return value
    if value is None or value == "":
        raise ValidationError("entrytype", "an entry type is required")
    try:
        return EntryType[str(value)]
    except KeyError:
        raise ValidationError(
            "entrytype",
            f"unknown entry type '{value}'. Allowed: {[e.name for e in EntryType]}",
        )


def severity_level(entry_type: EntryType) -> SeverityLevel:
    """Map a queryable entry type to its level in the severity table."""
    if entry_type not in QUERYABLE_ENTRY_TYPES:
        allowed = sorted(e.name for e in QUERYABLE_ENTRY_TYPES)
        raise ValidationError(
            "entrytype",
            f"'{entry_type.name}' cannot be queried. Allowed: {allowed}",
        )
    return SeverityLevel[entry_type.name]


@dataclass(frozen=True)
class EventSource:
    """A named emitter registered under a log."""

    name: str
    log: str


@dataclass(frozen=True)
class WriteRequest:
    """A single event to hand to the host."""

    source: str
    log: str
    event_id: int
    entry_type: EntryType
    message: str
    raw_data: bytes = RAW_DATA


@dataclass(frozen=True)
class EventRecord:
    """An event as returned by the host. Passed through untouched."""

    event_id: int
    level: Optional[int]
    entry_type: Optional[str]
    provider_name: str
    log_name: str
    message: str
    timestamp: Optional[datetime] = None
    computer_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventID": self.event_id,
            "level": self.level,
            "entryType": self.entry_type,
            "providerName": self.provider_name,
            "logName": self.log_name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "computerName": self.computer_name,
        }


@dataclass(frozen=True)
class EventFilter:
    """
    Query criteria for the host event log.

    provider_name and log_name are always present; level and event_id are
    only part of the criteria when set.
    """

    provider_name: str = DEFAULT_SOURCE
    log_name: str = DEFAULT_LOG
    level: Optional[SeverityLevel] = None
    event_id: Optional[int] = None

    def as_criteria(self) -> Dict[str, Any]:
        """
        Return the criteria as the host expects them.

        Returns:
            Dict with providerName and logName, plus level and eventID
            when they were supplied
        """
        criteria: Dict[str, Any] = {
            "providerName": self.provider_name,
            "logName": self.log_name,
        }
        if self.level is not None:
            criteria["level"] = int(self.level)
        if self.event_id is not None:
            criteria["eventID"] = self.event_id
        return criteria

    def to_xpath(self) -> str:
        """Render the criteria as an event log XPath selector."""
        clauses = [f"Provider[@Name={_xpath_literal(self.provider_name)}]"]
        if self.level is not None:
            clauses.append(f"(Level={int(self.level)})")
        if self.event_id is not None:
            clauses.append(f"(EventID={self.event_id})")
        return f"*[System[{' and '.join(clauses)}]]"

    def matches(self, record: EventRecord) -> bool:
        """Check a record against the criteria (used by the file host)."""
        if record.provider_name != self.provider_name:
            return False
        if record.log_name != self.log_name:
            return False
        if self.level is not None and record.level != int(self.level):
            return False
        if self.event_id is not None and record.event_id != self.event_id:
            return False
        return True


class EventFilterBuilder:
    """Assemble an EventFilter one optional field at a time."""

    def __init__(self, provider_name: str = DEFAULT_SOURCE, log_name: str = DEFAULT_LOG):
        self._filter = EventFilter(provider_name=provider_name, log_name=log_name)

    def with_level(self, level: SeverityLevel) -> "EventFilterBuilder":
        self._filter = replace(self._filter, level=level)
        return self

    def with_event_id(self, event_id: int) -> "EventFilterBuilder":
        self._filter = replace(self._filter, event_id=event_id)
        return self

    def build(self) -> EventFilter:
        return self._filter


def _xpath_literal(value: str) -> str:
    """Quote a string for XPath 1.0, which has no escape sequences."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    # The event log XPath subset has no concat()
    raise ValidationError("providerName", "cannot contain both ' and \" characters")
