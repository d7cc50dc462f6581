"""
Installed-version resolvers — ask a package manager what it installed.

Used only for workspace ``catalog:`` specifiers, where package.json
does not carry the real version. Resolution is best-effort: every
failure is logged as a warning and reported as "unknown" (None).
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from abc import abstractmethod
from pathlib import Path
from typing import Any

from electron_fix.adapters.base import Collaborator

logger = logging.getLogger(__name__)

# Checked in this order within each listed project
_DEPENDENCY_FIELDS = ("devDependencies", "dependencies")


class InstalledVersionResolver(Collaborator):
    """Look up the installed version of a package in a project."""

    @abstractmethod
    def installed_version(self, package: str, cwd: Path) -> str | None:
        """Return the installed version of ``package`` in ``cwd``, or None."""


class PnpmListResolver(InstalledVersionResolver):
    """Resolve via ``pnpm list <package> --json``.

    The call blocks until pnpm exits. There is no timeout.
    """

    @property
    def name(self) -> str:
        return "pnpm"

    def is_available(self) -> bool:
        return shutil.which("pnpm") is not None

    def command(self, package: str) -> list[str]:
        # pnpm is a .cmd shim on Windows; resolve it so no shell is needed
        exe = shutil.which("pnpm") or "pnpm"
        return [exe, "list", package, "--json", "--depth", "0"]

    def installed_version(self, package: str, cwd: Path) -> str | None:
        cmd = self.command(package)
        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd),
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError:
            logger.warning("pnpm not found; cannot resolve catalog version of %s", package)
            return None
        except subprocess.CalledProcessError as e:
            logger.warning(
                "pnpm list exited with code %d: %s",
                e.returncode,
                (e.stderr or "").strip() or "no output",
            )
            return None
        except OSError as e:
            logger.warning("pnpm list failed: %s", e)
            return None

        try:
            data = json.loads(result.stdout)
        except ValueError as e:
            logger.warning("pnpm list returned malformed JSON: %s", e)
            return None

        version = find_listed_version(data, package)
        if version is None:
            logger.warning("pnpm list has no entry for %s", package)
        return version


def find_listed_version(data: Any, package: str) -> str | None:
    """Find ``package`` in ``pnpm list --json`` output.

    The output is a list of project objects (one per workspace
    project) or, from older pnpm releases, a single object. The first
    entry with a version wins.
    """
    projects = data if isinstance(data, list) else [data]
    for project in projects:
        if not isinstance(project, dict):
            continue
        for field in _DEPENDENCY_FIELDS:
            deps = project.get(field)
            if not isinstance(deps, dict):
                continue
            entry = deps.get(package)
            if isinstance(entry, dict) and entry.get("version"):
                return str(entry["version"])
    return None
