"""Zed adapter: enable WakaTime via `auto_install_extensions` in settings.json."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from waka.core.errors import EditorNotFoundError
from waka.core.patcher import patch_settings
from waka.utils.paths import LINUX, MACOS, WINDOWS, current_platform, env_path, home_dir, user_config_dir

logger = logging.getLogger(__name__)

EXTENSION_KEY_PATH = ("auto_install_extensions", "wakatime")


def _succeeds(argv: list[str], require_output: bool = False) -> bool:
    try:
        result = subprocess.run(argv, capture_output=True, text=True, errors="replace")
    except OSError as e:
        logger.debug("Could not run %s: %s", argv[0], e)
        return False
    if result.returncode != 0:
        return False
    return bool((result.stdout or "").strip()) if require_output else True


@dataclass(frozen=True)
class Zed:
    name: str = "Zed"
    slug: str = "zed"

    def binary_paths(self) -> list[Path]:
        paths = [Path("/usr/bin/zed"), Path("/usr/bin/zeditor"), Path("/usr/local/bin/zed")]
        home = home_dir()
        if home is not None:
            paths.append(home / ".local/bin/zed")
        return paths

    def has_url_handler(self) -> bool:
        platform = current_platform()
        if platform == MACOS:
            return _succeeds(["/usr/bin/open", "-Ra", "zed"])
        if platform == LINUX:
            if _succeeds(["xdg-mime", "query", "default", "x-scheme-handler/zed"], require_output=True):
                return True
            return any(p.exists() for p in self.binary_paths())
        if platform == WINDOWS:
            return _succeeds(["reg", "query", r"HKEY_CLASSES_ROOT\zed"])
        return False

    def config_dir(self) -> Path | None:
        platform = current_platform()
        if platform == MACOS:
            home = home_dir()
            return home / ".config" / "zed" if home else None
        if platform == LINUX:
            flatpak = env_path("FLATPAK_XDG_CONFIG_HOME")
            if flatpak is not None:
                return flatpak / "zed"
            config = user_config_dir()
            return config / "zed" if config else None
        if platform == WINDOWS:
            config = user_config_dir()
            return config / "Zed" if config else None
        return None

    def settings_path(self) -> Path | None:
        config = self.config_dir()
        return config / "settings.json" if config else None

    def is_installed(self) -> bool:
        try:
            return self.has_url_handler()
        except OSError as e:
            logger.debug("Detection of Zed failed: %s", e)
            return False

    def install(self) -> None:
        settings = self.settings_path()
        if settings is None:
            raise EditorNotFoundError("Could not determine Zed config directory")
        patch_settings(settings, EXTENSION_KEY_PATH, True)
