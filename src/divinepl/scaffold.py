# Copyright 2025 Ben Mensi
# SPDX-License-Identifier: Apache-2.0

"""
Project scaffolding for `divinepl new`.

Copies a bundled template tree (genesis.divine, plus holy_trinity/ modules
for the miracle and prophet templates) and writes commandments.config.
"""

import importlib.resources
import json
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, List, Union

from divinepl.config import CONFIG_FILENAME


logger = logging.getLogger(__name__)

TEMPLATES = ("default", "miracle", "prophet")

_BASE_CONFIG: Dict[str, Any] = {
    "trinity": {
        "father": "main",
        "son": "child_processes",
        "holy_ghost": "background_services",
    },
    "sabbath_mode": True,
    "resurrection_enabled": True,
    "allow_confession": True,
}

_TEMPLATE_CONFIG: Dict[str, Dict[str, Any]] = {
    "default": {},
    "miracle": {"miracles_enabled": True},
    "prophet": {"prophecy_enabled": True, "revelation_level": "deep"},
}


class ScaffoldError(Exception):
    """Raised when a project cannot be created."""

    pass


def get_templates_dir() -> Path:
    """Get the path to the bundled project templates."""
    return Path(importlib.resources.files("divinepl") / "templates")


def template_config(template: str) -> Dict[str, Any]:
    """Return the commandments.config content for a template."""
    return {**_BASE_CONFIG, **_TEMPLATE_CONFIG[template]}


def create_project(name: str, template: str = "default", parent: Union[str, Path] = ".") -> List[Path]:
    """
    Create a new DivinePL project directory.

    Unknown template names fall back to "default".

    Args:
        name: Project directory name
        template: One of TEMPLATES
        parent: Directory to create the project in

    Returns:
        Created file paths, relative to the project directory

    Raises:
        ScaffoldError: If the project directory already exists or cannot be written
    """
    if template not in TEMPLATES:
        logger.warning(f"Unknown template '{template}', using default")
        template = "default"

    project_dir = Path(parent) / name
    if project_dir.exists():
        raise ScaffoldError(
            f"Project '{name}' already exists. Creation is sacred, duplication is heresy."
        )

    source_dir = get_templates_dir() / template
    created: List[Path] = []
    try:
        project_dir.mkdir(parents=True)
        for src_file in sorted(source_dir.rglob("*.divine")):
            rel = src_file.relative_to(source_dir)
            dst_file = project_dir / rel
            dst_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_file, dst_file)
            logger.debug(f"Created: {dst_file}")
            created.append(rel)

        config_path = project_dir / CONFIG_FILENAME
        config_path.write_text(json.dumps(template_config(template), indent=2) + "\n")
        created.append(Path(CONFIG_FILENAME))
    except OSError as e:
        raise ScaffoldError(f"Failed to create project: {e}")

    return created
