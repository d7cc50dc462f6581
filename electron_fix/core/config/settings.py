"""
Run configuration — mirror, paths and the platform-path table.

Sources, lowest to highest precedence:
    1. built-in defaults
    2. electron-fix.yml in the project root (optional)
    3. override keys in package.json (origin, entry, pathTxt)
    4. environment: EFIX_MIRROR, EFIX_DOWNLOAD_DIR, EFIX_EXTRACTOR

``path_txt`` merges per key at every level; other fields replace.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from electron_fix.core.config.loader import ConfigError
from electron_fix.core.models.manifest import Manifest

logger = logging.getLogger(__name__)

SETTINGS_FILE = "electron-fix.yml"

DEFAULT_ORIGIN = "https://npmmirror.com/mirrors/electron/"
DEFAULT_PATH_TXT: dict[str, str] = {
    "darwin": "Electron.app/Contents/MacOS/Electron",
    "win32": "electron.exe",
}

_ENV_FIELDS = {
    "EFIX_MIRROR": "origin",
    "EFIX_DOWNLOAD_DIR": "download_dir",
    "EFIX_EXTRACTOR": "extractor",
}


class FixConfig(BaseModel):
    """Everything about a run that isn't the manifest itself."""

    origin: str = DEFAULT_ORIGIN
    download_dir: str | None = None               # None = system temp dir
    install_subpath: str = "node_modules/electron"
    dist_dir: str = "dist"
    config_file: str = "path.txt"
    path_txt: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PATH_TXT))
    extractor: Literal["command", "zipfile"] = "command"

    def install_dir(self, project_root: Path) -> Path:
        return project_root / self.install_subpath

    def archive_dir(self) -> Path:
        return Path(self.download_dir) if self.download_dir else Path(tempfile.gettempdir())


def load_settings_file(root: Path) -> dict:
    """Read ``electron-fix.yml`` from ``root``; empty dict if absent."""
    path = root / SETTINGS_FILE
    if not path.is_file():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    logger.debug("Loaded settings from %s: %s", path, sorted(data))
    return data


def load_settings(
    root: Path | None,
    manifest: Manifest | None = None,
    env: Mapping[str, str] | None = None,
) -> FixConfig:
    """Merge all configuration sources into a FixConfig.

    Args:
        root: Project root holding the optional settings file.
        manifest: package.json with optional override keys.
        env: Environment mapping (default: ``os.environ``).

    Raises:
        ConfigError: If the settings file or a merged value is invalid.
    """
    env = os.environ if env is None else env
    merged: dict = {}
    path_txt = dict(DEFAULT_PATH_TXT)

    file_data = load_settings_file(root) if root else {}
    file_path_txt = file_data.pop("path_txt", None) or {}
    if not isinstance(file_path_txt, dict):
        raise ConfigError(f"'path_txt' in {SETTINGS_FILE} must be a mapping")
    path_txt.update(file_path_txt)
    merged.update(file_data)

    if manifest is not None:
        if manifest.origin:
            merged["origin"] = manifest.origin
        if manifest.entry:
            merged["download_dir"] = manifest.entry
        path_txt.update(manifest.path_txt)

    for var, field in _ENV_FIELDS.items():
        value = env.get(var)
        if value:
            logger.debug("%s overrides %s", var, field)
            merged[field] = value

    merged["path_txt"] = path_txt

    try:
        return FixConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
