"""Tests for event writing and stream forwarding.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
from unittest.mock import MagicMock

import pytest

from evlog.channels import ForwardingChannels
from evlog.errors import ValidationError
from evlog.models import EntryType
from evlog.writer import validate_write, write_event


class RecordingChannels(ForwardingChannels):
    """Channels that remember what was forwarded."""

    def __init__(self):
        super().__init__()
        self.errors = []
        self.verbose_messages = []

    def error(self, message, event_id):
        self.errors.append((message, event_id))

    def verbose(self, message):
        self.verbose_messages.append(message)


class TestValidateWrite:
    """Tests for validate_write()."""

    def test_valid_request(self):
        request = validate_write("Warning", 100, "disk low", source="svc", log="System")
        assert request.entry_type is EntryType.Warning
        assert request.event_id == 100
        assert request.message == "disk low"
        assert request.source == "svc"
        assert request.log == "System"
        assert request.raw_data == bytes((10, 20))

    def test_max_event_id_accepted(self):
        assert validate_write("Information", 65535, "x").event_id == 65535

    def test_event_id_above_max(self):
        with pytest.raises(ValidationError) as exc:
            validate_write("Information", 65536, "x")
        assert exc.value.field == "eventID"
        assert "65535" in str(exc.value)

    def test_event_id_required(self):
        with pytest.raises(ValidationError, match="eventID"):
            validate_write("Information", None, "x")

    def test_event_id_must_be_int(self):
        with pytest.raises(ValidationError, match="eventID"):
            validate_write("Information", "12", "x")

    @pytest.mark.parametrize("message", [None, ""])
    def test_message_required(self, message):
        with pytest.raises(ValidationError) as exc:
            validate_write("Information", 1, message)
        assert exc.value.field == "message"

    def test_entrytype_required(self):
        with pytest.raises(ValidationError) as exc:
            validate_write(None, 1, "x")
        assert exc.value.field == "entrytype"

    def test_unknown_entrytype(self):
        with pytest.raises(ValidationError, match="Verbose"):
            validate_write("Verbose", 1, "x")

    @pytest.mark.parametrize("name", [e.name for e in EntryType])
    def test_all_entry_types_writable(self, name):
        assert validate_write(name, 1, "x").entry_type.name == name


class TestWriteEvent:
    """Tests for write_event()."""

    def test_writes_to_host(self, fake_host):
        write_event(fake_host, "Information", 1000, "started", source="svc", log="Application")

        assert len(fake_host.written) == 1
        request = fake_host.written[0]
        assert request.event_id == 1000
        assert request.entry_type is EntryType.Information
        assert request.message == "started"

    def test_invalid_id_performs_no_write(self, fake_host):
        with pytest.raises(ValidationError):
            write_event(fake_host, "Information", 65536, "x")
        assert fake_host.written == []

    def test_error_stream_forwards_to_error_channel(self, fake_host):
        channels = RecordingChannels()

        write_event(fake_host, "Error", 65534, "BORKED!", stream=True, channels=channels)

        assert len(fake_host.written) == 1
        assert channels.errors == [("BORKED!", 65534)]
        assert channels.verbose_messages == []

    def test_information_stream_forwards_to_verbose_channel(self, fake_host):
        channels = RecordingChannels()

        write_event(fake_host, "Information", 10, "hello", stream=True, channels=channels)

        assert channels.verbose_messages == ["hello"]
        assert channels.errors == []

    @pytest.mark.parametrize("entrytype", ["Warning", "SuccessAudit", "FailureAudit"])
    def test_other_types_forward_nothing(self, fake_host, entrytype):
        channels = RecordingChannels()

        write_event(fake_host, entrytype, 65534, "BORKED!", stream=True, channels=channels)

        assert len(fake_host.written) == 1
        assert channels.errors == []
        assert channels.verbose_messages == []

    def test_no_forwarding_without_stream(self, fake_host):
        channels = MagicMock(spec=ForwardingChannels)

        write_event(fake_host, "Error", 1, "x", channels=channels)

        channels.forward.assert_not_called()

    def test_default_channels_log_error(self, fake_host, caplog):
        with caplog.at_level(logging.DEBUG, logger="evlog.stream"):
            write_event(fake_host, "Error", 65534, "BORKED!", stream=True)

        records = [r for r in caplog.records if r.name == "evlog.stream.error"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert records[0].event_id == 65534
        assert "BORKED!" in records[0].getMessage()

    def test_host_write_error_skips_forwarding(self, fake_host):
        channels = MagicMock(spec=ForwardingChannels)

        def broken_write(request):
            raise RuntimeError("source not registered")

        fake_host.write = broken_write
        with pytest.raises(RuntimeError, match="source not registered"):
            write_event(fake_host, "Error", 1, "x", stream=True, channels=channels)
        channels.forward.assert_not_called()
