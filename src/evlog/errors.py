# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by evlog.

Host-native failures (e.g. pywintypes.error) are never wrapped here; they
propagate to the caller unchanged. The one exception is source creation,
which is reported as RegistrationError.
"""


class EventLogError(Exception):
    """Base class for evlog errors."""

    pass


class ValidationError(EventLogError, ValueError):
    """Raised when an argument fails validation, before any host call."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class RegistrationError(EventLogError):
    """Raised when an event source could not be created."""

    def __init__(self, source: str, log: str, reason: str = ""):
        self.source = source
        self.log = log
        msg = f"Failed to create source '{source}' in log '{log}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class HostError(EventLogError):
    """Raised by the file-backed host for its own failures."""

    pass
