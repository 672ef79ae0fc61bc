"""JetBrains IDE adapter: detect config dirs, install via `<cli> installPlugins`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from waka.core.errors import EditorNotFoundError
from waka.core.process import is_process_running
from waka.core.resolver import resolve_cli
from waka.editors.base import run_installer
from waka.utils.output import warn
from waka.utils.paths import LINUX, MACOS, WINDOWS, current_platform, env_path, home_dir

logger = logging.getLogger(__name__)

PLUGIN_ID = "com.wakatime.intellij.plugin"


@dataclass(frozen=True)
class JetBrainsFamily:
    """One JetBrains IDE, e.g. PyCharm.

    ``product_codes`` prefix the per-version config directories
    (``PyCharm2024.1``, ``PyCharmCE2023.3``); ``app_names`` are the macOS
    bundle names and the Windows install folder names.
    """

    name: str
    slug: str
    product_codes: tuple[str, ...]
    cli_command: str
    app_names: tuple[str, ...] = ()

    def config_root(self) -> Path | None:
        platform = current_platform()
        if platform == WINDOWS:
            appdata = env_path("APPDATA")
            return appdata / "JetBrains" if appdata else None
        home = home_dir()
        if home is None:
            return None
        if platform == MACOS:
            return home / "Library" / "Application Support" / "JetBrains"
        if platform == LINUX:
            return home / ".config" / "JetBrains"
        return None

    def config_dirs(self) -> list[Path]:
        base = self.config_root()
        if base is None:
            return []
        try:
            entries = list(base.iterdir())
        except OSError:
            return []
        return [
            entry for entry in entries
            if any(entry.name.startswith(code) for code in self.product_codes)
        ]

    def cli_paths(self) -> list[Path]:
        """Known install locations for the CLI launcher on this platform."""
        platform = current_platform()
        cli = self.cli_command
        home = home_dir()
        paths: list[Path] = []

        if platform == MACOS:
            for app in self.app_names:
                bundle = Path(f"{app}.app") / "Contents" / "MacOS" / cli
                paths.append(Path("/Applications") / bundle)
                if home is not None:
                    paths.append(home / "Applications" / bundle)
        elif platform == LINUX:
            if home is not None:
                paths.append(home / ".local/share/JetBrains/Toolbox/apps" / cli / "bin" / cli)
            paths.append(Path("/opt") / cli / "bin" / cli)
            paths.append(Path("/usr/local/bin") / cli)
            paths.append(Path("/snap/bin") / cli)
        elif platform == WINDOWS:
            local = env_path("LOCALAPPDATA")
            if local is not None:
                paths.append(local / "JetBrains" / "Toolbox" / "apps" / cli / "bin" / f"{cli}.cmd")
            program_files = env_path("ProgramFiles")
            if program_files is not None:
                for app in self.app_names:
                    paths.append(program_files / "JetBrains" / app / "bin" / f"{cli}.bat")
        return paths

    def find_cli(self) -> Path | None:
        return resolve_cli(self.cli_command, self.cli_paths())

    def is_installed(self) -> bool:
        try:
            return bool(self.config_dirs()) or self.find_cli() is not None
        except OSError as e:
            logger.debug("Detection of %s failed: %s", self.name, e)
            return False

    def install(self) -> None:
        if is_process_running(self.cli_command):
            warn(f"{self.name} appears to be running. Please close it for the plugin to install correctly.")

        cli = self.find_cli()
        if cli is None:
            raise EditorNotFoundError(f"{self.name} CLI not found")

        run_installer(self.name, cli, [str(cli), "installPlugins", PLUGIN_ID])
