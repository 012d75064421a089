# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Event source registration.

Ensures a named source exists under a log. Safe to call on every startup.
"""

import logging

from evlog.errors import RegistrationError
from evlog.hosts.base import HostEventLog
from evlog.models import DEFAULT_LOG, DEFAULT_SOURCE

logger = logging.getLogger(__name__)


def register_source(
    host: HostEventLog,
    source: str = DEFAULT_SOURCE,
    log: str = DEFAULT_LOG,
) -> bool:
    """
    Create source under log unless it already exists.

    A single check-then-create; concurrent callers may both see the source as
    missing and both try to create it.

    Args:
        host: Host event log
        source: Source name
        log: Log name

    Returns:
        True if the source was created, False if it already existed

    Raises:
        RegistrationError: If the host failed to create the source
    """
    if host.exists(source, log):
        logger.warning(f"Source '{source}' already exists in log '{log}'")
        return False

    try:
        host.create(log, source)
    except Exception as e:
        raise RegistrationError(source, log, str(e)) from e

    logger.info(f"Created source '{source}' in log '{log}'")
    return True
