"""
Host identification in Node's vocabulary.

Electron release archives are named with Node's ``process.platform``
and ``process.arch`` values, not Python's.
"""

from __future__ import annotations

import platform
import sys

# platform.machine() → process.arch
_ARCH_MAP = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv7": "arm",
    "arm": "arm",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "ppc64le": "ppc64",
    "s390x": "s390x",
}


def host_platform() -> str:
    """``process.platform`` equivalent: darwin, linux, win32, freebsd, ..."""
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform in ("win32", "cygwin", "msys"):
        return "win32"
    if sys.platform.startswith("freebsd"):
        return "freebsd"
    return sys.platform


def host_arch() -> str:
    """``process.arch`` equivalent: x64, arm64, ia32, arm, ..."""
    machine = platform.machine().lower()
    return _ARCH_MAP.get(machine, machine)
