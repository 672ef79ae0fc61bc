"""Shared fixtures: pinned platform, fake home, recorded subprocess calls."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

_PLATFORM_SEAMS = (
    "waka.utils.paths.current_platform",
    "waka.core.process.current_platform",
    "waka.editors.jetbrains.current_platform",
    "waka.editors.vscode.current_platform",
    "waka.editors.zed.current_platform",
)


@pytest.fixture
def set_platform(monkeypatch):
    """Return a function that pins every platform check to the given name."""

    def _set(name: str) -> None:
        for target in _PLATFORM_SEAMS:
            monkeypatch.setattr(target, lambda: name)

    return _set


@pytest.fixture
def home(tmp_path: Path, monkeypatch, set_platform) -> Path:
    """A fake home directory on a pinned Linux platform with an empty PATH."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("FLATPAK_XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr("shutil.which", lambda cmd, *a, **kw: None)
    set_platform("linux")
    return home_dir


class FakeRun:
    """Stand-in for subprocess.run that records argv and replays canned results.

    Byte output is decoded the way ``text=True`` does it, honouring the
    ``errors`` keyword, so undecodable bytes raise unless the caller asked
    for replacement.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self.results: dict[str, subprocess.CompletedProcess | Exception] = {}

    def set(
        self, program: str, returncode: int = 0, stdout: str | bytes = "", stderr: str | bytes = ""
    ) -> None:
        self.results[program] = subprocess.CompletedProcess([program], returncode, stdout, stderr)

    def fail(self, program: str, exc: Exception) -> None:
        self.results[program] = exc

    def programs(self) -> list[str]:
        return [argv[0] for argv in self.calls]

    def __call__(self, argv, *args, **kwargs):
        self.calls.append(list(argv))
        self.kwargs.append(kwargs)
        result = self.results.get(argv[0])
        if result is None:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if isinstance(result, Exception):
            raise result
        errors = kwargs.get("errors") or "strict"
        stdout, stderr = (
            out.decode("utf-8", errors) if isinstance(out, bytes) else out
            for out in (result.stdout, result.stderr)
        )
        return subprocess.CompletedProcess(argv, result.returncode, stdout, stderr)


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    runner = FakeRun()
    monkeypatch.setattr("subprocess.run", runner)
    return runner
