"""
path.txt writer — names the platform executable inside ``dist``.

The electron npm package reads this file to locate its binary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from electron_fix.core.models.errors import ErrorKind, FixError
from electron_fix.core.services.host import host_platform

logger = logging.getLogger(__name__)


def write_config(
    output: Path | str,
    mapping: Mapping[str, str] | None,
    *,
    platform: str | None = None,
) -> str:
    """Write this platform's executable path as the whole file.

    Unmapped platforms get an empty file.

    Returns:
        The content written.

    Raises:
        FixError: CONFIG_WRITE_FAILED if the file cannot be written.
    """
    output = Path(output)
    key = platform or host_platform()
    content = (mapping or {}).get(key, "")

    try:
        # newline="" so nothing is translated or appended
        with open(output, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as e:
        raise FixError(
            ErrorKind.CONFIG_WRITE_FAILED,
            f"Cannot write {output}: {e}",
            path=str(output),
        ) from e

    logger.info("Wrote %s (%s → %r)", output, key, content)
    return content
