"""Tests for parsing rendered event XML.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

from datetime import datetime, timezone

from evlog.hosts.records import level_name, parse_event_xml, parse_system_time

SAMPLE_XML = """\
<Event xmlns='http://schemas.microsoft.com/win/2004/08/events/event'>
  <System>
    <Provider Name='whartonCoreServices'/>
    <EventID Qualifiers='0'>65534</EventID>
    <Level>2</Level>
    <Task>0</Task>
    <TimeCreated SystemTime='2025-03-04T05:06:07.1234567Z'/>
    <Channel>Application</Channel>
    <Computer>WS01.example.org</Computer>
  </System>
  <EventData>
    <Data>BORKED!</Data>
    <Binary>0A14</Binary>
  </EventData>
</Event>
"""


class TestParseEventXml:
    """Tests for parse_event_xml()."""

    def test_fields(self):
        record = parse_event_xml(SAMPLE_XML)
        assert record.event_id == 65534
        assert record.level == 2
        assert record.entry_type == "Error"
        assert record.provider_name == "whartonCoreServices"
        assert record.log_name == "Application"
        assert record.computer_name == "WS01.example.org"
        assert record.message == "BORKED!"
        assert record.timestamp == datetime(2025, 3, 4, 5, 6, 7, 123456, tzinfo=timezone.utc)

    def test_explicit_message_wins(self):
        record = parse_event_xml(SAMPLE_XML, message="formatted text")
        assert record.message == "formatted text"

    def test_multiple_data_strings(self):
        xml = SAMPLE_XML.replace("<Data>BORKED!</Data>", "<Data>one</Data><Data>two</Data>")
        assert parse_event_xml(xml).message == "one\ntwo"


class TestHelpers:
    """Tests for the small parsing helpers."""

    def test_system_time_without_fraction(self):
        assert parse_system_time("2025-01-01T00:00:00Z") == datetime(
            2025, 1, 1, tzinfo=timezone.utc
        )

    def test_system_time_invalid(self):
        assert parse_system_time("yesterday") is None
        assert parse_system_time(None) is None

    def test_level_name(self):
        assert level_name(4) == "Information"
        assert level_name(0) == "LogAlways"
        assert level_name(17) is None
        assert level_name(None) is None
