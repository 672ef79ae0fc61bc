"""Tests for the VS Code family adapter."""

from pathlib import Path

import pytest

from waka.core.errors import EditorNotFoundError, InstallCommandFailedError, InstallCommandSpawnError
from waka.editors.vscode import EXTENSION_ID, VsCodeFamily

VSCODE = VsCodeFamily("VS Code", "vscode", ".vscode", "code", "Visual Studio Code", "Microsoft VS Code")


def _on_path(monkeypatch, path: str) -> None:
    monkeypatch.setattr("shutil.which", lambda cmd: path if cmd == "code" else None)


class TestDetect:
    def test_nothing_installed(self, home):
        assert VSCODE.is_installed() is False

    def test_config_dir_present(self, home):
        (home / ".vscode").mkdir()
        assert VSCODE.is_installed() is True

    def test_extensions_dir(self, home):
        assert VSCODE.extensions_dir() == home / ".vscode" / "extensions"

    def test_cli_on_path(self, home, monkeypatch):
        _on_path(monkeypatch, "/usr/bin/code")
        assert VSCODE.is_installed() is True


class TestCliPaths:
    def test_linux(self, home):
        assert VSCODE.cli_paths() == [
            Path("/usr/bin/code"),
            Path("/usr/local/bin/code"),
            Path("/snap/bin/code"),
            home / ".local/bin/code",
        ]

    def test_macos(self, home, set_platform):
        set_platform("macos")
        suffix = "Applications/Visual Studio Code.app/Contents/Resources/app/bin/code"
        assert VSCODE.cli_paths() == [Path("/") / suffix, home / suffix]

    def test_windows(self, home, set_platform, monkeypatch, tmp_path):
        set_platform("windows")
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "Local"))
        monkeypatch.setenv("ProgramFiles", str(tmp_path / "PF"))
        monkeypatch.setenv("ProgramFiles(x86)", str(tmp_path / "PF86"))
        assert VSCODE.cli_paths() == [
            tmp_path / "Local/Programs/Microsoft VS Code/bin/code.cmd",
            tmp_path / "PF/Microsoft VS Code/bin/code.cmd",
            tmp_path / "PF86/Microsoft VS Code/bin/code.cmd",
        ]

    def test_windows_paths_never_checked_on_linux(self, home, monkeypatch, tmp_path):
        monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "Local"))
        cli = tmp_path / "Local/Programs/Microsoft VS Code/bin/code.cmd"
        cli.parent.mkdir(parents=True)
        cli.write_text("")
        assert VSCODE.find_cli() is None


class TestInstall:
    def test_cli_not_found(self, home, fake_run):
        (home / ".vscode").mkdir()
        with pytest.raises(EditorNotFoundError, match="in your PATH"):
            VSCODE.install()
        assert fake_run.calls == []

    def test_success(self, home, fake_run, monkeypatch):
        _on_path(monkeypatch, "/usr/bin/code")
        fake_run.set("/usr/bin/code")
        VSCODE.install()
        assert fake_run.calls == [["/usr/bin/code", "--install-extension", EXTENSION_ID]]

    def test_windows_wraps_in_cmd(self, home, fake_run, monkeypatch, set_platform):
        set_platform("windows")
        _on_path(monkeypatch, "C:/VSCode/bin/code.cmd")
        fake_run.set("cmd")
        VSCODE.install()
        assert fake_run.calls == [
            ["cmd", "/C", str(Path("C:/VSCode/bin/code.cmd")), "--install-extension", EXTENSION_ID]
        ]

    def test_non_zero_exit(self, home, fake_run, monkeypatch):
        _on_path(monkeypatch, "/usr/bin/code")
        fake_run.set("/usr/bin/code", returncode=1, stderr="Extension not found\n")
        with pytest.raises(InstallCommandFailedError) as exc:
            VSCODE.install()
        assert exc.value.returncode == 1
        assert "Exit code: 1" in str(exc.value)
        assert "Extension not found" in str(exc.value)

    def test_spawn_failure(self, home, fake_run, monkeypatch):
        _on_path(monkeypatch, "/usr/bin/code")
        fake_run.fail("/usr/bin/code", PermissionError(13, "Permission denied"))
        with pytest.raises(InstallCommandSpawnError) as exc:
            VSCODE.install()
        assert "Permission denied" in str(exc.value)
