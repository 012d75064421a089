"""Directory-backed event log host.

Used on machines without the Windows event log, and for local development.

Implementation rules enforced here:
- One append-only JSONL file per log, no rotation, no truncation
- Registered sources live in sources.json
- Writes for unregistered sources or negative event ids fail, like the Windows host
- Local only: remote computer names are rejected

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from evlog.errors import HostError
from evlog.models import EntryType, EventFilter, EventRecord, WriteRequest

logger = logging.getLogger(__name__)

SOURCES_FILE = "sources.json"

# Classic event types as the event log reports their level
ENTRY_LEVELS: Dict[EntryType, int] = {
    EntryType.Error: 2,
    EntryType.Warning: 3,
    EntryType.Information: 4,
    EntryType.SuccessAudit: 0,
    EntryType.FailureAudit: 0,
}


class FileEventLog:
    """HostEventLog storing each log as <dir>/<log>.jsonl."""

    def __init__(self, log_dir: Path):
        self.log_dir = Path(log_dir).expanduser()
        self.log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def sources_path(self) -> Path:
        return self.log_dir / SOURCES_FILE

    def log_path(self, log: str) -> Path:
        if not log or "/" in log or "\\" in log or log.startswith("."):
            raise HostError(f"Invalid log name: '{log}'")
        return self.log_dir / f"{log}.jsonl"

    def _load_sources(self) -> Dict[str, List[str]]:
        if not self.sources_path.exists():
            return {}
        try:
            return json.loads(self.sources_path.read_text())
        except json.JSONDecodeError as e:
            raise HostError(f"Corrupt source registry {self.sources_path}: {e}")

    def exists(self, source: str, log: str) -> bool:
        return source in self._load_sources().get(log, [])

    def create(self, log: str, source: str) -> None:
        log_path = self.log_path(log)
        sources = self._load_sources()
        registered = sources.setdefault(log, [])
        if source not in registered:
            registered.append(source)
        with open(self.sources_path, "w") as f:
            json.dump(sources, f, indent=2)
        log_path.touch(exist_ok=True)
        logger.debug(f"Registered {source} in {self.sources_path}")

    def write(self, request: WriteRequest) -> None:
        if request.event_id < 0:
            raise HostError(f"Event id must be >= 0, got {request.event_id}")
        if not self.exists(request.source, request.log):
            raise HostError(
                f"Source '{request.source}' is not registered in log '{request.log}'"
            )

        event = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "eventID": request.event_id,
            "entryType": request.entry_type.name,
            "level": ENTRY_LEVELS[request.entry_type],
            "providerName": request.source,
            "logName": request.log,
            "message": request.message,
            "rawData": list(request.raw_data),
        }

        with self.log_path(request.log).open("a") as f:
            f.write(json.dumps(event) + "\n")

    def query(
        self, criteria: EventFilter, computer_name: Optional[str] = None
    ) -> Iterator[EventRecord]:
        """Yield matching events, oldest first."""
        if computer_name:
            raise HostError(
                f"File event log cannot query remote computer '{computer_name}'"
            )

        path = self.log_path(criteria.log_name)
        if not path.exists():
            raise HostError(f"Log not found: '{criteria.log_name}'")
        return self._scan(path, criteria)

    def _scan(self, path: Path, criteria: EventFilter) -> Iterator[EventRecord]:
        with path.open("r") as f:
            for line in f:
                if not line.strip():
                    continue
                record = _to_record(json.loads(line))
                if criteria.matches(record):
                    yield record


def _to_record(event: Dict) -> EventRecord:
    timestamp = event.get("timestamp")
    return EventRecord(
        event_id=event["eventID"],
        level=event.get("level"),
        entry_type=event.get("entryType"),
        provider_name=event["providerName"],
        log_name=event["logName"],
        message=event.get("message", ""),
        timestamp=datetime.fromisoformat(timestamp) if timestamp else None,
    )
