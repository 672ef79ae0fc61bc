"""VS Code family adapter (VS Code, VSCodium, Cursor, Windsurf, ...)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from waka.core.errors import EditorNotFoundError
from waka.core.resolver import resolve_cli
from waka.editors.base import run_installer
from waka.utils.paths import LINUX, MACOS, WINDOWS, current_platform, env_path, home_dir

logger = logging.getLogger(__name__)

EXTENSION_ID = "WakaTime.vscode-wakatime"


@dataclass(frozen=True)
class VsCodeFamily:
    name: str
    slug: str
    config_subdir: str  # e.g. ".vscode", holds the extensions/ directory
    cli_command: str
    macos_app_name: str
    windows_app_folder: str

    def extensions_dir(self) -> Path | None:
        home = home_dir()
        if home is None:
            return None
        return home / self.config_subdir / "extensions"

    def cli_paths(self) -> list[Path]:
        platform = current_platform()
        cli = self.cli_command
        home = home_dir()
        paths: list[Path] = []

        if platform == MACOS:
            app_bin = Path("Applications") / f"{self.macos_app_name}.app" / "Contents/Resources/app/bin" / cli
            paths.append(Path("/") / app_bin)
            if home is not None:
                paths.append(home / app_bin)
        elif platform == LINUX:
            paths.append(Path("/usr/bin") / cli)
            paths.append(Path("/usr/local/bin") / cli)
            paths.append(Path("/snap/bin") / cli)
            if home is not None:
                paths.append(home / ".local/bin" / cli)
        elif platform == WINDOWS:
            binary = f"{cli}.cmd"
            local = env_path("LOCALAPPDATA")
            if local is not None:
                paths.append(local / "Programs" / self.windows_app_folder / "bin" / binary)
            for var in ("ProgramFiles", "ProgramFiles(x86)"):
                root = env_path(var)
                if root is not None:
                    paths.append(root / self.windows_app_folder / "bin" / binary)
        return paths

    def find_cli(self) -> Path | None:
        return resolve_cli(self.cli_command, self.cli_paths())

    def is_installed(self) -> bool:
        try:
            if self.find_cli() is not None:
                return True
            extensions = self.extensions_dir()
            return extensions is not None and extensions.parent.exists()
        except OSError as e:
            logger.debug("Detection of %s failed: %s", self.name, e)
            return False

    def install_command(self, cli: Path) -> list[str]:
        argv = [str(cli), "--install-extension", EXTENSION_ID]
        if current_platform() == WINDOWS:
            # `code` is a .cmd batch file; run it through the shell.
            return ["cmd", "/C", *argv]
        return argv

    def install(self) -> None:
        cli = self.find_cli()
        if cli is None:
            raise EditorNotFoundError(f"{self.name} CLI not found. Is it installed and in your PATH?")

        run_installer(self.name, cli, self.install_command(cli))
