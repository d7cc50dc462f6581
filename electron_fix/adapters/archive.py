"""
Archive extractors — unpack a release zip into a directory.

Contract: given an existing archive and a destination directory,
extract every entry, overwrite conflicts, and raise
``FixError(EXTRACT_FAILED)`` on failure.

Two implementations:
    command  — ``unzip`` (or PowerShell ``Expand-Archive`` on Windows).
               Default: keeps the symlinks inside macOS app bundles.
    zipfile  — pure Python, no external tool required.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import zipfile
from abc import abstractmethod
from pathlib import Path

from electron_fix.adapters.base import Collaborator
from electron_fix.core.models.errors import ErrorKind, FixError
from electron_fix.core.services.host import host_platform

logger = logging.getLogger(__name__)


class ArchiveExtractor(Collaborator):
    """Extract an archive into a directory, overwriting existing files."""

    @abstractmethod
    def extract(self, archive: Path, output: Path) -> None:
        """Extract ``archive`` into ``output``. Raises FixError on failure."""


class UnzipCommandExtractor(ArchiveExtractor):
    """Shell out to the platform's archive utility."""

    def __init__(self, platform: str | None = None):
        self._platform = platform

    @property
    def name(self) -> str:
        return "command"

    @property
    def platform(self) -> str:
        return self._platform or host_platform()

    def is_available(self) -> bool:
        tool = "powershell" if self.platform == "win32" else "unzip"
        return shutil.which(tool) is not None

    def command(self, archive: Path, output: Path) -> list[str]:
        if self.platform == "win32":
            script = (
                f"Expand-Archive -LiteralPath {_ps_quote(archive)} "
                f"-DestinationPath {_ps_quote(output)} -Force"
            )
            return ["powershell", "-NoProfile", "-NonInteractive", "-Command", script]
        return ["unzip", "-o", str(archive), "-d", str(output)]

    def extract(self, archive: Path, output: Path) -> None:
        cmd = self.command(archive, output)
        logger.debug("Executing: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            logger.error("exec error: %s", e)
            raise FixError(
                ErrorKind.EXTRACT_FAILED,
                f"Cannot run {cmd[0]}: {e}",
                archive=str(archive),
                output=str(output),
                command=cmd,
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.error("exec error: %s exited with code %d: %s", cmd[0], result.returncode, stderr)
            raise FixError(
                ErrorKind.EXTRACT_FAILED,
                stderr or f"{cmd[0]} exited with code {result.returncode}",
                archive=str(archive),
                output=str(output),
                command=cmd,
                returncode=result.returncode,
            )


def _ps_quote(path: Path) -> str:
    """PowerShell single-quoted literal; an embedded quote is doubled."""
    return "'" + str(path).replace("'", "''") + "'"


class ZipfileExtractor(ArchiveExtractor):
    """Extract with the ``zipfile`` module.

    Restores the Unix permission bits recorded in the archive so the
    electron binary stays executable.
    """

    @property
    def name(self) -> str:
        return "zipfile"

    def is_available(self) -> bool:
        return True

    def extract(self, archive: Path, output: Path) -> None:
        try:
            with zipfile.ZipFile(archive) as zf:
                for info in zf.infolist():
                    # extract() sanitizes the member name; chmod what it wrote
                    target = zf.extract(info, output)
                    mode = (info.external_attr >> 16) & 0o777
                    if mode and not info.is_dir():
                        os.chmod(target, mode)
        except (zipfile.BadZipFile, OSError) as e:
            logger.error("extract error: %s", e)
            raise FixError(
                ErrorKind.EXTRACT_FAILED,
                f"Cannot extract {archive}: {e}",
                archive=str(archive),
                output=str(output),
            ) from e


_EXTRACTORS: dict[str, type[ArchiveExtractor]] = {
    "command": UnzipCommandExtractor,
    "zipfile": ZipfileExtractor,
}


def get_extractor(name: str = "command") -> ArchiveExtractor:
    """Look up an extractor by name."""
    try:
        return _EXTRACTORS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown extractor '{name}'. Valid: {', '.join(sorted(_EXTRACTORS))}"
        ) from None
