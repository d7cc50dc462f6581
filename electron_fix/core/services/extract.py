"""
Archive extraction entry point.
"""

from __future__ import annotations

import logging
from pathlib import Path

from electron_fix.adapters.archive import ArchiveExtractor, get_extractor
from electron_fix.core.models.errors import ErrorKind, FixError

logger = logging.getLogger(__name__)


def unzip(
    entry: Path | str,
    output: Path | str,
    extractor: ArchiveExtractor | None = None,
) -> Path:
    """Extract ``entry`` into ``output``, overwriting existing files.

    The existence check happens before the extractor is touched, so a
    missing archive never starts a subprocess.

    Raises:
        FixError: ARCHIVE_MISSING if ``entry`` does not exist,
            EXTRACT_FAILED if the extractor fails.
    """
    entry, output = Path(entry), Path(output)
    if not entry.exists():
        raise FixError(ErrorKind.ARCHIVE_MISSING, "File does not exist!", archive=str(entry))

    extractor = extractor or get_extractor()
    logger.info("Extracting %s → %s (%s)", entry, output, extractor.name)
    extractor.extract(entry, output)
    return output
