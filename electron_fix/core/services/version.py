"""
Version resolution — turn a package.json specifier into a bare version.

Handles three specifier shapes:
    30.0.0           → 30.0.0
    ^30.0.0 / ~30.0  → 30.0.0 / 30.0
    catalog:[name]   → asks the package manager; falls back to "name"

Never raises: an undeterminable version is returned as "" and the
filename builder reports it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from electron_fix.adapters.package_manager import InstalledVersionResolver, PnpmListResolver
from electron_fix.core.models.manifest import ELECTRON, Manifest

logger = logging.getLogger(__name__)

CATALOG_PREFIX = "catalog:"
_RANGE_PREFIXES = ("^", "~")


def as_manifest(data: Manifest | Mapping[str, Any]) -> Manifest:
    """Accept a Manifest or a raw package.json mapping."""
    if isinstance(data, Manifest):
        return data
    return Manifest.model_validate(dict(data))


def normalize_specifier(spec: str) -> str:
    """Strip a single leading ``^`` or ``~``."""
    if spec.startswith(_RANGE_PREFIXES):
        return spec[1:]
    return spec


def get_version(
    data: Manifest | Mapping[str, Any],
    resolver: InstalledVersionResolver | None = None,
) -> str:
    """Resolve the Electron version declared by a manifest.

    Args:
        data: The manifest (or raw package.json mapping).
        resolver: Installed-version lookup for ``catalog:`` specifiers.
            Defaults to ``pnpm list``.

    Returns:
        Bare version string, or "" when nothing can be determined.
    """
    manifest = as_manifest(data)
    spec = manifest.declared_specifier(ELECTRON)

    if spec.startswith(CATALOG_PREFIX):
        cwd = Path(manifest.pwd) if manifest.pwd else Path.cwd()
        resolver = resolver or PnpmListResolver()
        installed = resolver.installed_version(ELECTRON, cwd)
        if installed:
            logger.info("Resolved %s via %s: %s", spec, resolver.name, installed)
            return normalize_specifier(installed)
        fallback = spec.split(":", 1)[1]
        logger.info("Falling back to catalog text for %s: %r", spec, fallback)
        return fallback

    return normalize_specifier(spec)
