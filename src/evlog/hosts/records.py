"""
Parsing of rendered Windows event XML into EventRecord.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Optional

from evlog.models import EventRecord, SeverityLevel

EVENT_NS = {"e": "http://schemas.microsoft.com/win/2004/08/events/event"}

# SystemTime carries up to 7 fractional digits; datetime takes 6
_SYSTEM_TIME_RE = re.compile(r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?Z?$")


def parse_system_time(value: Optional[str]) -> Optional[datetime]:
    """Parse an event SystemTime attribute (always UTC)."""
    if not value:
        return None
    match = _SYSTEM_TIME_RE.match(value.strip())
    if not match:
        return None
    stamp = datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
    fraction = (match.group(2) or "")[:6].ljust(6, "0")
    return stamp.replace(microsecond=int(fraction), tzinfo=timezone.utc)


def level_name(level: Optional[int]) -> Optional[str]:
    """Return the severity name for a level, or None outside the table."""
    if level is None:
        return None
    try:
        return SeverityLevel(level).name
    except ValueError:
        return None


def parse_event_xml(xml: str, message: Optional[str] = None) -> EventRecord:
    """
    Build an EventRecord from EvtRender XML.

    Args:
        xml: Rendered event XML
        message: Formatted message if the caller resolved one; otherwise the
            EventData strings are joined

    Returns:
        EventRecord with the host's values
    """
    root = ET.fromstring(xml)
    system = root.find("e:System", EVENT_NS)

    def text(tag: str) -> Optional[str]:
        node = system.find(f"e:{tag}", EVENT_NS) if system is not None else None
        return node.text if node is not None else None

    provider = system.find("e:Provider", EVENT_NS) if system is not None else None
    created = system.find("e:TimeCreated", EVENT_NS) if system is not None else None

    level_text = text("Level")
    level = int(level_text) if level_text not in (None, "") else None

    if message is None:
        data = root.findall("e:EventData/e:Data", EVENT_NS)
        message = "\n".join(d.text for d in data if d.text)

    return EventRecord(
        event_id=int(text("EventID") or 0),
        level=level,
        entry_type=level_name(level),
        provider_name=provider.get("Name", "") if provider is not None else "",
        log_name=text("Channel") or "",
        message=message,
        timestamp=parse_system_time(created.get("SystemTime")) if created is not None else None,
        computer_name=text("Computer"),
    )
