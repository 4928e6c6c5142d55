# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""Script file loading."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

SCRIPT_SUFFIXES = (".divine", ".dpl")


class ScriptReadError(Exception):
    """Raised when a script cannot be read."""

    pass


def read_script(path: Union[str, Path]) -> str:
    """Read a DivinePL script as UTF-8 text.

    Raises:
        ScriptReadError: If the file is missing or unreadable.
    """
    script_path = Path(path).expanduser()
    if not script_path.exists():
        raise ScriptReadError(f"Failed to read the scripture: {script_path} not found")
    if script_path.is_dir():
        raise ScriptReadError(f"Failed to read the scripture: {script_path} is a directory")
    if script_path.suffix not in SCRIPT_SUFFIXES:
        logger.warning(f"{script_path.name} is not a .divine or .dpl script; reading anyway")
    try:
        return script_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptReadError(f"Failed to read the scripture: {e}")
