"""
Configuration loader for evlog.

Loads the optional YAML configuration file and resolves the event log
settings (default source, log, and host adapter).

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from evlog.models import DEFAULT_LOG, DEFAULT_SOURCE

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "evlog.yml"
DEFAULT_FILE_DIR = "~/.evlog/logs"


def default_host() -> str:
    """Windows event log on Windows, file host everywhere else."""
    return "windows" if sys.platform == "win32" else "file"


@dataclass(frozen=True)
class EventLogSettings:
    """Resolved event log settings passed into each operation."""

    source: str = DEFAULT_SOURCE
    log: str = DEFAULT_LOG
    host: str = field(default_factory=default_host)
    dir: Path = Path(DEFAULT_FILE_DIR).expanduser()


def find_config(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Locate the config file.

    Args:
        config_path: Explicit path. If None, tries ~/.evlog.yml then ./evlog.yml

    Returns:
        Path to the config file, or None if no default location has one
    """
    if config_path:
        return Path(config_path).expanduser()

    home_config = Path.home() / f".{CONFIG_FILENAME}"
    local_config = Path.cwd() / CONFIG_FILENAME
    if home_config.exists():
        return home_config
    if local_config.exists():
        return local_config
    return None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, the default locations are
            tried and a missing file yields an empty config

    Returns:
        Dictionary containing configuration

    Raises:
        FileNotFoundError: If an explicit config file does not exist
        yaml.YAMLError: If config file is invalid YAML
    """
    path = find_config(config_path)
    if path is None:
        logger.debug("No config file found, using defaults")
        return {}

    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Error parsing config file {path}: {e}")

    if config is None:
        config = {}

    from evlog.validation import validate_config
    issues = validate_config(config)
    if issues:
        logger.warning("Configuration validation warnings:")
        for issue in issues:
            logger.warning(f"  - {issue}")

    return config


def get_settings(config: Dict[str, Any]) -> EventLogSettings:
    """
    Resolve EventLogSettings from a config dict, filling in defaults.

    Args:
        config: Configuration dictionary

    Returns:
        EventLogSettings
    """
    section = config.get("eventlog") or {}
    if not isinstance(section, dict):
        section = {}

    return EventLogSettings(
        source=section.get("source") or DEFAULT_SOURCE,
        log=section.get("log") or DEFAULT_LOG,
        host=section.get("host") or default_host(),
        dir=Path(section.get("dir") or DEFAULT_FILE_DIR).expanduser(),
    )
