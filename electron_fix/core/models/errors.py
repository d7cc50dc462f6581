"""
Failure kinds — the closed set of ways a fix run can fail.

Services raise ``FixError``; the orchestrator turns it into a failed
``FixResult`` instead of letting it escape to the CLI.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Why a run stopped."""

    VERSION_UNRESOLVED = "version_unresolved"
    ARCHIVE_MISSING = "archive_missing"
    DOWNLOAD_FAILED = "download_failed"
    EXTRACT_FAILED = "extract_failed"
    CONFIG_WRITE_FAILED = "config_write_failed"


class FixError(Exception):
    """A typed failure carrying structured context.

    Args:
        kind: Which step failed.
        message: Human-readable summary.
        **context: Step-specific details (url, path, return code, ...).
    """

    def __init__(self, kind: ErrorKind, message: str, **context: Any) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.context: dict[str, Any] = context

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def __repr__(self) -> str:
        return f"FixError(kind={self.kind.value!r}, message={self.message!r})"
