"""Install error hierarchy.

Detection never raises; every failure of an install attempt is raised as
one of these so the caller can report it and move on to the next editor.
"""

from __future__ import annotations

from pathlib import Path


class InstallError(Exception):
    """Base class for all plugin installation failures."""


class EditorNotFoundError(InstallError):
    """The editor's CLI (or config location) could not be resolved."""


class InstallCommandSpawnError(InstallError):
    """The installer subprocess could not be started at all."""

    def __init__(self, editor: str, command: Path | str, reason: str) -> None:
        self.editor = editor
        self.command = str(command)
        self.reason = reason
        super().__init__(f"Failed to execute {self.command} for {editor}: {reason}")


class InstallCommandFailedError(InstallError):
    """The installer subprocess ran but exited non-zero."""

    def __init__(self, editor: str, returncode: int | None, detail: str = "") -> None:
        self.editor = editor
        self.returncode = returncode
        msg = f"Failed to install WakaTime plugin for {editor}. Exit code: {returncode}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class ConfigParseError(InstallError):
    """An existing settings document is not valid JSON-with-comments."""

    def __init__(self, path: Path | None, message: str, line: int = 0, column: int = 0) -> None:
        self.path = path
        self.message = message
        self.line = line
        self.column = column
        where = f"{path}" if path is not None else "<document>"
        if line:
            where += f":{line}:{column}"
        super().__init__(f"Invalid {where}: {message}")


class ConfigShapeError(InstallError):
    """The settings document has a non-object where an object is required."""


class ConfigWriteError(InstallError):
    """Reading, creating the directory for, or writing a settings file failed."""

    def __init__(self, path: Path, reason: str, action: str = "write") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {action} {path}: {reason}")
