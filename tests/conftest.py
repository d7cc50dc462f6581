"""
Shared test fixtures and configuration.
"""

import json
import zipfile
from pathlib import Path

import pytest


def write_package_json(directory: Path, data: dict) -> Path:
    path = directory / "package.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the caller's EFIX_* overrides out of every test."""
    for var in ("EFIX_MIRROR", "EFIX_DOWNLOAD_DIR", "EFIX_EXTRACTOR", "EFIX_LOG_LEVEL", "EFIX_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def electron_project(tmp_path: Path) -> Path:
    """A project declaring electron 30.0.0 with node_modules/electron present."""
    root = tmp_path / "app"
    root.mkdir()
    write_package_json(root, {"name": "app", "devDependencies": {"electron": "^30.0.0"}})
    install = root / "node_modules" / "electron"
    install.mkdir(parents=True)
    write_package_json(install, {"name": "electron", "version": "30.0.0"})
    return root


@pytest.fixture
def electron_zip(tmp_path: Path) -> Path:
    """A small stand-in for a release archive."""
    path = tmp_path / "fixture.zip"
    with zipfile.ZipFile(path, "w") as zf:
        info = zipfile.ZipInfo("electron")
        info.external_attr = 0o755 << 16
        zf.writestr(info, "#!/bin/sh\n")
        zf.writestr("version", "v30.0.0")
        zf.writestr("resources/default_app.asar", b"\x00asar")
    return path
