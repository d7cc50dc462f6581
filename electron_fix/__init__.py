"""electron-fix — repair a broken Electron binary install from a mirror."""

__version__ = "0.1.0"
