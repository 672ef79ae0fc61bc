"""CLI fixtures: isolated config dir and a fake editor registry."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from waka.core.errors import InstallError


@dataclass
class FakeEditor:
    name: str
    slug: str
    installed: bool = True
    error: str = ""
    installs: list = field(default_factory=list)

    def is_installed(self) -> bool:
        return self.installed

    def install(self) -> None:
        self.installs.append(self.slug)
        if self.error:
            raise InstallError(self.error)


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Redirect the global config dir to a temp directory."""
    path = tmp_path / "config"
    monkeypatch.setenv("WAKA_INSTALL_CONFIG_DIR", str(path))
    return path


@pytest.fixture
def editors(monkeypatch):
    """Replace the registry seen by the CLI with fake editors."""
    fakes = [
        FakeEditor("VS Code", "vscode"),
        FakeEditor("PyCharm", "pycharm", installed=False),
        FakeEditor("Zed", "zed"),
    ]
    by_slug = {e.slug: e for e in fakes}

    def _get_editors(slugs):
        return [by_slug[s] for s in slugs]

    monkeypatch.setattr("waka.cli.main.list_editors", lambda: list(fakes))
    monkeypatch.setattr("waka.cli.main.get_editors", _get_editors)
    monkeypatch.setattr("waka.cli.main.editor_slugs", lambda: list(by_slug))
    return by_slug
