"""
Adapters — pluggable external tools (archive utilities, package managers).
"""

from electron_fix.adapters.archive import (
    ArchiveExtractor,
    UnzipCommandExtractor,
    ZipfileExtractor,
    get_extractor,
)
from electron_fix.adapters.base import Collaborator
from electron_fix.adapters.package_manager import (
    InstalledVersionResolver,
    PnpmListResolver,
)

__all__ = [
    "ArchiveExtractor",
    "Collaborator",
    "InstalledVersionResolver",
    "PnpmListResolver",
    "UnzipCommandExtractor",
    "ZipfileExtractor",
    "get_extractor",
]
