# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Project configuration (commandments.config) loading.

The file is JSON as written by `divinepl new`, but any YAML mapping is
accepted since it is parsed with yaml.safe_load.

Lookup order:
1. Explicit path argument
2. $DIVINEPL_CONFIG (if set)
3. ./commandments.config
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "commandments.config"
CONFIG_ENV_VAR = "DIVINEPL_CONFIG"


class ConfigError(Exception):
    """Raised when the commandments file is invalid."""

    pass


@dataclass
class Commandments:
    """Settings from commandments.config.

    Missing keys take the defaults below.
    """

    trinity: Dict[str, str] = field(default_factory=dict)
    sabbath_mode: bool = True
    resurrection_enabled: bool = True
    allow_confession: bool = True
    miracles_enabled: bool = False
    prophecy_enabled: bool = False
    revelation_level: Optional[str] = None
    source: Optional[Path] = None  # file it was loaded from, None for defaults


_BOOL_KEYS = (
    "sabbath_mode",
    "resurrection_enabled",
    "allow_confession",
    "miracles_enabled",
    "prophecy_enabled",
)


def find_config(path: Optional[str] = None) -> Optional[Path]:
    """Resolve the config path, or None if no file exists.

    Raises:
        FileNotFoundError: If an explicitly given path does not exist.
    """
    if path:
        explicit = Path(path).expanduser()
        if not explicit.exists():
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        if candidate.exists():
            return candidate
        logger.warning(f"${CONFIG_ENV_VAR} points to missing file: {candidate}")

    local = Path(CONFIG_FILENAME)
    if local.exists():
        return local
    return None


def parse_config(data: Any, source: Optional[Path] = None) -> Commandments:
    """Build Commandments from a parsed document."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source or CONFIG_FILENAME} must contain a mapping")

    trinity = data.get("trinity", {})
    if not isinstance(trinity, dict):
        raise ConfigError(f"trinity must be a mapping, got: {trinity!r}")

    values: Dict[str, Any] = {}
    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be true or false, got: {data[key]!r}")
            values[key] = data[key]

    revelation_level = data.get("revelation_level")
    if revelation_level is not None and not isinstance(revelation_level, str):
        raise ConfigError(f"revelation_level must be a string, got: {revelation_level!r}")

    return Commandments(
        trinity={str(k): str(v) for k, v in trinity.items()},
        revelation_level=revelation_level,
        source=source,
        **values,
    )


def load_config(path: Optional[str] = None) -> Commandments:
    """Load commandments.config, falling back to defaults when absent.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the file is not a valid mapping.
    """
    config_path = find_config(path)
    if config_path is None:
        logger.debug("No commandments.config found; using defaults")
        return Commandments()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {config_path}: {e}")

    logger.debug(f"Loaded commandments from {config_path}")
    return parse_config(data, source=config_path)
