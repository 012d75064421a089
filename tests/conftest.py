# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

import pytest

from evlog.hosts.file import FileEventLog
from evlog.models import EventFilter, EventRecord, WriteRequest


class FakeHost:
    """Recording HostEventLog for tests."""

    def __init__(self, records: Optional[List[EventRecord]] = None, create_error: Optional[Exception] = None):
        self.sources: Set[Tuple[str, str]] = set()
        self.records = records or []
        self.create_error = create_error
        self.created: List[Tuple[str, str]] = []
        self.written: List[WriteRequest] = []
        self.queries: List[Tuple[EventFilter, Optional[str]]] = []

    def exists(self, source: str, log: str) -> bool:
        return (source, log) in self.sources

    def create(self, log: str, source: str) -> None:
        if self.create_error is not None:
            raise self.create_error
        self.created.append((log, source))
        self.sources.add((source, log))

    def query(self, criteria: EventFilter, computer_name: Optional[str] = None) -> Iterator[EventRecord]:
        self.queries.append((criteria, computer_name))
        return iter(self.records)

    def write(self, request: WriteRequest) -> None:
        self.written.append(request)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_host() -> FakeHost:
    """Empty recording host."""
    return FakeHost()


@pytest.fixture
def file_host(temp_dir) -> FileEventLog:
    """File-backed host in a temporary directory."""
    return FileEventLog(temp_dir / "logs")


@pytest.fixture
def sample_config(temp_dir) -> Dict[str, Any]:
    """Sample configuration for testing."""
    return {
        "eventlog": {
            "source": "whartonCoreServices",
            "log": "Application",
            "host": "file",
            "dir": str(temp_dir / "logs"),
        }
    }


@pytest.fixture
def config_file(temp_dir, sample_config):
    """Create a temporary config file."""
    config_path = temp_dir / "evlog.yml"
    import yaml
    with open(config_path, "w") as f:
        yaml.dump(sample_config, f)
    return config_path
