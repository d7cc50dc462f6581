"""
Domain models — Pydantic types for electron-fix.

All models are re-exported here for convenient access:

    from electron_fix.core.models import Manifest, FixError, ErrorKind
"""

from electron_fix.core.models.errors import ErrorKind, FixError
from electron_fix.core.models.manifest import ELECTRON, Manifest

__all__ = [
    # errors.py
    "ErrorKind",
    "FixError",
    # manifest.py
    "ELECTRON",
    "Manifest",
]
