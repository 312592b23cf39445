"""YAML configuration parser for vsfinder.

This module provides parsing and validation for vsfinder.yaml configuration files.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from vsfinder.core.exceptions import ConfigError, InvalidVersionRequestError
from vsfinder.finder.constraints import VersionRequest

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "vsfinder.yaml"


@dataclass
class FinderConfig:
    """Complete vsfinder configuration."""

    version: int = 1
    msvs_version: Optional[str] = None  # release year or installation path
    use_environment: bool = True  # honour VCINSTALLDIR
    records: Optional[str] = None  # default installation records file


def parse_config(config_path: Path) -> FinderConfig:
    """
    Parse vsfinder.yaml configuration file.

    Args:
        config_path: Path to vsfinder.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    config = _parse_and_validate(data)
    logger.debug(f"Loaded configuration from {config_path}: {config}")
    return config


def find_config(project_root: Path, config_file: Optional[Path] = None) -> Optional[Path]:
    """
    Locate the configuration file.

    Args:
        project_root: Directory searched for vsfinder.yaml
        config_file: Explicit path, which must exist if given

    Returns:
        Path to the configuration file, or None if there is none
    """
    if config_file is not None:
        return config_file

    default_config = project_root / CONFIG_FILENAME
    if default_config.exists():
        return default_config

    logger.debug(f"No {CONFIG_FILENAME} in {project_root}")
    return None


def _parse_and_validate(data: dict) -> FinderConfig:
    """Parse and validate configuration data."""
    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    msvs_version = data.get("msvs_version")
    if msvs_version is not None:
        # YAML reads an unquoted 2019 as an int
        msvs_version = str(msvs_version)
        try:
            VersionRequest.parse(msvs_version)
        except InvalidVersionRequestError as e:
            raise ConfigError(str(e))

    use_environment = data.get("use_environment", True)
    if not isinstance(use_environment, bool):
        raise ConfigError("use_environment must be true or false")

    records = data.get("records")
    if records is not None and not isinstance(records, str):
        raise ConfigError("records must be a path string")

    return FinderConfig(
        version=data["version"],
        msvs_version=msvs_version,
        use_environment=use_environment,
        records=records,
    )
