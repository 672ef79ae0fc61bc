"""Platform selection and home/config directory helpers.

Everything OS-specific in the editor adapters is keyed on
``current_platform()`` so each adapter only ever checks the path table for
the platform it is running on.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

MACOS = "macos"
LINUX = "linux"
WINDOWS = "windows"
OTHER = "other"


def current_platform() -> str:
    """Return one of ``macos``, ``linux``, ``windows`` or ``other``."""
    if sys.platform == "darwin":
        return MACOS
    if sys.platform.startswith("linux"):
        return LINUX
    if sys.platform in ("win32", "cygwin"):
        return WINDOWS
    return OTHER


def home_dir() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def env_path(name: str) -> Path | None:
    """Return an environment variable as a Path, or None if unset/empty."""
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value)


def user_config_dir() -> Path | None:
    """Per-user configuration root, following the platform's convention.

    Linux honours ``XDG_CONFIG_HOME``; Windows uses ``%APPDATA%``; macOS
    uses ``~/Library/Application Support``.
    """
    platform = current_platform()
    if platform == WINDOWS:
        return env_path("APPDATA")
    home = home_dir()
    if platform == MACOS:
        return home / "Library" / "Application Support" if home else None
    xdg = env_path("XDG_CONFIG_HOME")
    if xdg is not None and xdg.is_absolute():
        return xdg
    return home / ".config" if home else None
