"""
Manifest loader — reads package.json into a Manifest.

The manifest is read from the invoking directory and augmented with
that directory (``PWD``) before anything else sees it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from electron_fix.core.models.manifest import Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


class ConfigError(Exception):
    """Raised when package.json or electron-fix.yml is missing or invalid."""


def find_manifest_file(start_dir: Path | None = None) -> Path | None:
    """Search for package.json starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to package.json, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_manifest(root: Path | None = None) -> Manifest:
    """Load ``<root>/package.json`` and record ``root`` as its PWD.

    Args:
        root: Project directory (default: cwd). Not searched upward:
            node_modules/electron lives next to this package.json.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    root = (root or Path.cwd()).resolve()
    path = root / MANIFEST_FILE

    if not path.is_file():
        hint = ""
        found = find_manifest_file(root.parent)
        if found:
            hint = f" (did you mean to run from {found.parent}?)"
        raise ConfigError(f"No {MANIFEST_FILE} found in {root}{hint}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    data["PWD"] = str(root)

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {MANIFEST_FILE}: {e}") from e

    logger.info("Loaded manifest '%s' from %s", manifest.name or "<unnamed>", root)
    return manifest
