"""
Fix use case — download a matching Electron build and install it in place.

Sequence:
    resolve version → build file name → installed? → download
    → (extract ‖ write path.txt) → done

Every step failure is a ``FixError``; it ends the run and comes back
as a failed ``FixResult``. Nothing is cleaned up afterwards.
"""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from electron_fix.adapters.archive import ArchiveExtractor, get_extractor
from electron_fix.adapters.package_manager import InstalledVersionResolver
from electron_fix.core.config.settings import FixConfig, load_settings
from electron_fix.core.models.errors import FixError
from electron_fix.core.models.manifest import ELECTRON, Manifest
from electron_fix.core.services.download import download_electron, download_url
from electron_fix.core.services.extract import unzip
from electron_fix.core.services.filename import ARCHIVE_SUFFIX, set_file_name
from electron_fix.core.services.path_config import write_config
from electron_fix.core.services.version import as_manifest, get_version

logger = logging.getLogger(__name__)

# reporter(kind, message); kind is info | progress | success | fail | hint
Reporter = Callable[[str, str], None]
Downloader = Callable[[str, Path], Any]

_PACKAGE_DESCRIPTOR = "package.json"


@dataclass
class FixResult:
    """Outcome of one fix run."""

    status: Literal["ok", "not_installed", "failed"] = "ok"
    version: str = ""
    file_name: str = ""
    download_url: str = ""
    archive_path: Path | None = None
    install_dir: Path | None = None
    config_content: str | None = None
    error: FixError | None = None
    steps: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"


def _log_reporter(kind: str, message: str) -> None:
    level = logging.WARNING if kind in ("fail", "hint") else logging.INFO
    logger.log(level, "%s", message)


def is_install_electron(data: Manifest | Mapping[str, Any], package_path: Path | str) -> bool:
    """Whether electron is something we can patch.

    False when a project root is known but ``package_path`` (the
    electron package descriptor) is missing. Otherwise true iff the
    manifest declares electron in either dependency map.
    """
    manifest = as_manifest(data)
    if manifest.pwd and not Path(package_path).exists():
        return False
    return manifest.declares(ELECTRON)


def fix_electron(
    data: Manifest | Mapping[str, Any],
    config: FixConfig | None = None,
    *,
    resolver: InstalledVersionResolver | None = None,
    extractor: ArchiveExtractor | None = None,
    downloader: Downloader | None = None,
    reporter: Reporter | None = None,
) -> FixResult:
    """Download, extract and configure Electron for a project.

    Args:
        data: The project manifest (PWD set to the project root).
        config: Run configuration. Defaults to ``load_settings`` for
            the manifest's root.
        resolver: Installed-version lookup for catalog specifiers.
        extractor: Archive extractor. Defaults to ``config.extractor``.
        downloader: ``(url, destination)`` callable. Defaults to
            ``download_electron``.
        reporter: Progress sink. Defaults to logging.

    Returns:
        FixResult. ``not_installed`` is not an error.
    """
    manifest = as_manifest(data)
    root = Path(manifest.pwd) if manifest.pwd else Path.cwd()
    if config is None:
        config = load_settings(root if manifest.pwd else None, manifest)
    report = reporter or _log_reporter
    downloader = downloader or download_electron
    result = FixResult()

    try:
        result.version = get_version(manifest, resolver)
        report("info", f"Electron version: {result.version}")
        report("progress", "Loading...")

        result.file_name = set_file_name(manifest, version=result.version) + ARCHIVE_SUFFIX
        result.install_dir = config.install_dir(root)

        if not is_install_electron(manifest, result.install_dir / _PACKAGE_DESCRIPTOR):
            result.status = "not_installed"
            report("fail", "You didn't install electron!")
            report("hint", "Try it 'yarn add electron' or 'npm install electron -D'.")
            return result

        result.download_url = download_url(config.origin, result.version, result.file_name)
        # extraction reads the archive from exactly where it was downloaded
        result.archive_path = config.archive_dir() / result.file_name

        report("progress", "Download Electron...")
        downloader(result.download_url, result.archive_path)
        result.steps.append("download")
        report("success", "Download Electron successful!")

        result.config_content = _extract_and_configure(
            result,
            config,
            extractor or get_extractor(config.extractor),
            report,
        )
    except FixError as e:
        logger.error("Fix failed: %s", e)
        result.status = "failed"
        result.error = e
        report("fail", e.message)
        return result

    report("success", "Success!")
    return result


def _extract_and_configure(
    result: FixResult,
    config: FixConfig,
    extractor: ArchiveExtractor,
    report: Reporter,
) -> str:
    """Run extraction and the path.txt write side by side; join both.

    Returns the path.txt content. Raises the first FixError in
    submission order once both have finished.
    """
    assert result.install_dir is not None and result.archive_path is not None
    dist = result.install_dir / config.dist_dir
    config_path = result.install_dir / config.config_file

    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as pool:
        futures = {
            "extract": pool.submit(unzip, result.archive_path, dist, extractor),
            "config": pool.submit(write_config, config_path, config.path_txt),
        }
        concurrent.futures.wait(futures.values())

    messages = {
        "extract": "Unzip Electron successful!",
        "config": "Write configuration succeeded!",
    }
    first_error: FixError | None = None
    for step, future in futures.items():
        exc = future.exception()
        if exc is None:
            result.steps.append(step)
            report("success", messages[step])
            continue
        if not isinstance(exc, FixError):
            raise exc
        if first_error is None:
            first_error = exc
        else:
            logger.error("Also failed: %s", exc)

    if first_error is not None:
        raise first_error
    return futures["config"].result()
