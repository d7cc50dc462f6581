"""
Archive download — stream one HTTP GET to disk.

No timeout, no retry, and no cleanup: a failed transfer may leave a
truncated file behind.
"""

from __future__ import annotations

import http.client
import logging
import shutil
import urllib.error
import urllib.request
from pathlib import Path

from electron_fix import __version__
from electron_fix.core.models.errors import ErrorKind, FixError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def download_url(origin: str, version: str, file_name: str) -> str:
    """``<origin>/<version>/<file_name>``, tolerating a trailing slash on origin."""
    return f"{origin.rstrip('/')}/{version}/{file_name}"


def download_electron(url: str, destination: Path) -> Path:
    """Stream ``url`` into ``destination``.

    Args:
        url: Full archive URL.
        destination: File to write. Its parent is created if missing.

    Returns:
        The destination path.

    Raises:
        FixError: DOWNLOAD_FAILED on any network, HTTP or filesystem error,
            including a malformed response from the mirror.
    """
    destination = Path(destination)
    logger.info("Downloading %s → %s", url, destination)

    try:
        req = urllib.request.Request(
            url,
            headers={"User-Agent": f"electron-fix/{__version__}"},
        )
        destination.parent.mkdir(parents=True, exist_ok=True)
        with urllib.request.urlopen(req) as resp, open(destination, "wb") as fh:  # noqa: S310
            shutil.copyfileobj(resp, fh, _CHUNK_SIZE)
    except urllib.error.HTTPError as e:
        raise FixError(
            ErrorKind.DOWNLOAD_FAILED,
            f"HTTP {e.code} fetching {url}",
            url=url,
            destination=str(destination),
            status=e.code,
        ) from e
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        raise FixError(
            ErrorKind.DOWNLOAD_FAILED,
            f"Failed to download {url}: {e}",
            url=url,
            destination=str(destination),
        ) from e

    logger.debug("Downloaded %d bytes", destination.stat().st_size)
    return destination
