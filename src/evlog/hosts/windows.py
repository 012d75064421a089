# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Windows event log host, via pywin32.

Sources live under HKLM\\SYSTEM\\CurrentControlSet\\Services\\EventLog\\<log>.
Creating one needs an elevated process; the pywintypes.error from the
registry call is left for the registrar to report.
"""

import logging
import winreg
from typing import Dict, Iterator, Optional

import win32evtlog
import win32evtlogutil

from evlog.hosts.records import parse_event_xml
from evlog.models import EntryType, EventFilter, EventRecord, WriteRequest

logger = logging.getLogger(__name__)

EVENTLOG_KEY = r"SYSTEM\CurrentControlSet\Services\EventLog"

# Number of event handles fetched per EvtNext call
BATCH_SIZE = 64

EVENT_TYPES: Dict[EntryType, int] = {
    EntryType.Error: win32evtlog.EVENTLOG_ERROR_TYPE,
    EntryType.Warning: win32evtlog.EVENTLOG_WARNING_TYPE,
    EntryType.Information: win32evtlog.EVENTLOG_INFORMATION_TYPE,
    EntryType.SuccessAudit: win32evtlog.EVENTLOG_AUDIT_SUCCESS,
    EntryType.FailureAudit: win32evtlog.EVENTLOG_AUDIT_FAILURE,
}


class WindowsEventLog:
    """HostEventLog backed by the Windows event log service."""

    def exists(self, source: str, log: str) -> bool:
        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, rf"{EVENTLOG_KEY}\{log}\{source}"):
                return True
        except FileNotFoundError:
            return False

    def create(self, log: str, source: str) -> None:
        win32evtlogutil.AddSourceToRegistry(source, eventLogType=log)

    def write(self, request: WriteRequest) -> None:
        win32evtlogutil.ReportEvent(
            request.source,
            request.event_id,
            eventType=EVENT_TYPES[request.entry_type],
            strings=[request.message],
            data=request.raw_data,
        )

    def query(
        self, criteria: EventFilter, computer_name: Optional[str] = None
    ) -> Iterator[EventRecord]:
        """Yield matching events, newest first."""
        session = None
        if computer_name:
            session = win32evtlog.EvtOpenSession(
                (computer_name, None, None, None, win32evtlog.EvtRpcLoginAuthDefault),
                win32evtlog.EvtRpcLogin,
            )

        xpath = criteria.to_xpath()
        logger.debug(f"EvtQuery {criteria.log_name}: {xpath}")
        handle = win32evtlog.EvtQuery(
            criteria.log_name,
            win32evtlog.EvtQueryChannelPath | win32evtlog.EvtQueryReverseDirection,
            xpath,
            session,
        )

        while True:
            events = win32evtlog.EvtNext(handle, BATCH_SIZE)
            if not events:
                break
            for event in events:
                xml = win32evtlog.EvtRender(event, win32evtlog.EvtRenderEventXml)
                yield parse_event_xml(xml)
