"""
Archive filename — ``electron-v<version>-<platform>-<arch>[-symbols]``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from electron_fix.adapters.package_manager import InstalledVersionResolver
from electron_fix.core.models.errors import ErrorKind, FixError
from electron_fix.core.models.manifest import Manifest
from electron_fix.core.services.host import host_arch, host_platform
from electron_fix.core.services.version import as_manifest, get_version

ARCHIVE_SUFFIX = ".zip"


def set_file_name(
    data: Manifest | Mapping[str, Any] | str | None,
    *,
    version: str | None = None,
    resolver: InstalledVersionResolver | None = None,
    platform: str | None = None,
    arch: str | None = None,
) -> str:
    """Build the archive base name (no extension).

    A plain string is taken to be an already-built name and returned
    as is.

    Args:
        data: Manifest, raw package.json mapping, or a prebuilt name.
        version: Pre-resolved version; skips a second resolver call.
        resolver: Passed to ``get_version`` for catalog specifiers.
        platform: Node platform name (default: this host).
        arch: Node arch name (default: this host).

    Raises:
        FixError: VERSION_UNRESOLVED if there is no data or no version.
    """
    if isinstance(data, str):
        return data
    if data is None:
        raise FixError(ErrorKind.VERSION_UNRESOLVED, "version is undefined")

    manifest = as_manifest(data)
    if version is None:
        version = get_version(manifest, resolver)
    if not version:
        raise FixError(
            ErrorKind.VERSION_UNRESOLVED,
            "version is undefined",
            specifier=manifest.declared_specifier(),
        )

    parts = [
        "electron",
        f"v{version}",
        platform or host_platform(),
        arch or host_arch(),
    ]
    if manifest.symbols:
        parts.append("symbols")
    return "-".join(parts)
