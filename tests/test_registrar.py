"""Tests for source registration.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging

import pytest

from conftest import FakeHost
from evlog.errors import RegistrationError
from evlog.registrar import register_source


class TestRegisterSource:
    """Tests for register_source()."""

    def test_creates_missing_source(self, fake_host):
        """Should create the source when it does not exist."""
        assert register_source(fake_host, "svc", "Application") is True
        assert fake_host.created == [("Application", "svc")]

    def test_defaults(self, fake_host):
        """Should use the default source and log names."""
        register_source(fake_host)
        assert fake_host.created == [("Application", "whartonCoreServices")]

    def test_second_call_is_idempotent(self, fake_host, caplog):
        """Second call should warn, not fail, and not create again."""
        register_source(fake_host, "svc", "Application")

        with caplog.at_level(logging.WARNING, logger="evlog.registrar"):
            assert register_source(fake_host, "svc", "Application") is False

        assert fake_host.created == [("Application", "svc")]
        assert "Source 'svc' already exists in log 'Application'" in caplog.text

    def test_create_failure_raises_registration_error(self):
        """Should raise RegistrationError naming source and log."""
        host = FakeHost(create_error=PermissionError("Access is denied"))

        with pytest.raises(RegistrationError) as exc:
            register_source(host, "svc", "Security")

        assert "svc" in str(exc.value)
        assert "Security" in str(exc.value)
        assert exc.value.source == "svc"
        assert exc.value.log == "Security"
        assert isinstance(exc.value.__cause__, PermissionError)

    def test_exists_failure_propagates(self, fake_host):
        """Host errors from the existence check are not reinterpreted."""

        def broken_exists(source, log):
            raise OSError("registry unavailable")

        fake_host.exists = broken_exists
        with pytest.raises(OSError, match="registry unavailable"):
            register_source(fake_host, "svc", "Application")
