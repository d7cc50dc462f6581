"""
Collaborator base — the contract for external tools electron-fix leans on.

Archive extraction and package-manager queries are both outside
concerns. The core talks to them only through these small interfaces
so tests can swap in fakes and callers can swap implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Collaborator(ABC):
    """Abstract base for pluggable external tools.

    To add one:
        1. Subclass the relevant interface (ArchiveExtractor, ...)
        2. Implement name, is_available and the operation
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier used in logs and config (e.g. 'command', 'pnpm')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying tool exists. Fast, never raises."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
