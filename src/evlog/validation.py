# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Configuration validation for evlog.

Validates YAML configuration structure and provides helpful error messages.
"""

import logging
from typing import Any, Dict, List, Set

logger = logging.getLogger(__name__)

# Valid top-level keys in config
VALID_TOP_LEVEL_KEYS = {"eventlog"}

# Recognized keys under eventlog
VALID_EVENTLOG_KEYS = {"source", "log", "host", "dir"}

VALID_HOSTS = {"windows", "file"}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration structure and return list of warnings/errors.

    Args:
        config: Configuration dictionary loaded from YAML

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    unknown_keys = set(config.keys()) - VALID_TOP_LEVEL_KEYS
    for key in sorted(unknown_keys):
        suggestion = suggest_fix(key, VALID_TOP_LEVEL_KEYS)
        hint = f" Did you mean '{suggestion}'?" if suggestion else ""
        issues.append(f"Unknown top-level config key: '{key}'.{hint}")

    if "eventlog" not in config:
        return issues

    section = config["eventlog"]
    if not isinstance(section, dict):
        issues.append(f"'eventlog' must be a dictionary, got {type(section).__name__}")
        return issues

    for key in sorted(set(section.keys()) - VALID_EVENTLOG_KEYS):
        suggestion = suggest_fix(key, VALID_EVENTLOG_KEYS)
        hint = f" Did you mean '{suggestion}'?" if suggestion else ""
        issues.append(f"eventlog: Unknown key '{key}'.{hint}")

    for key in ("source", "log"):
        if key in section and not (isinstance(section[key], str) and section[key].strip()):
            issues.append(f"eventlog.{key}: must be a non-empty string")

    host = section.get("host")
    if host is not None and host not in VALID_HOSTS:
        issues.append(
            f"eventlog.host: '{host}' is not valid. "
            f"Valid hosts are: {', '.join(sorted(VALID_HOSTS))}"
        )

    if "dir" in section and host == "windows":
        logger.debug("eventlog.dir is ignored by the windows host")

    return issues


def suggest_fix(typo: str, valid_options: Set[str]) -> str:
    """
    Suggest a correction for a typo based on Levenshtein distance.

    Args:
        typo: The incorrect string
        valid_options: Set of valid options

    Returns:
        Suggested correction or empty string if no close match
    """
    def distance(s1: str, s2: str) -> int:
        if len(s1) > len(s2):
            s1, s2 = s2, s1
        distances = range(len(s1) + 1)
        for i2, c2 in enumerate(s2):
            distances_ = [i2 + 1]
            for i1, c1 in enumerate(s1):
                if c1 == c2:
                    distances_.append(distances[i1])
                else:
                    distances_.append(1 + min((distances[i1], distances[i1 + 1], distances_[-1])))
            distances = distances_
        return distances[-1]

    best_match = None
    best_distance = float("inf")

    for option in sorted(valid_options):
        dist = distance(str(typo).lower(), option.lower())
        if dist < best_distance and dist <= 2:  # Max distance of 2 for suggestions
            best_distance = dist
            best_match = option

    return best_match or ""
