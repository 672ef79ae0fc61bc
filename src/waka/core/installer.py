"""Run detection and installation across a set of editors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel

from waka.core.errors import InstallError
from waka.editors.base import EditorPlugin

logger = logging.getLogger(__name__)


class InstallStatus(str, Enum):
    installed = "installed"
    failed = "failed"
    not_detected = "not_detected"
    skipped = "skipped"
    would_install = "would_install"


class InstallResult(BaseModel):
    editor: str
    slug: str
    status: InstallStatus
    error: str = ""


def detect_editors(editors: Iterable[EditorPlugin]) -> list[dict]:
    """Check which editors are present."""
    return [
        {"editor": e.name, "slug": e.slug, "installed": e.is_installed()}
        for e in editors
    ]


def install_plugins(
    editors: Iterable[EditorPlugin],
    skip: Iterable[str] = (),
    dry_run: bool = False,
) -> list[InstallResult]:
    """Install the plugin into every detected editor, one at a time.

    A failure is recorded and the run continues with the next editor.
    """
    skipped = set(skip)
    results: list[InstallResult] = []
    for editor in editors:
        if editor.slug in skipped:
            status = InstallStatus.skipped
        elif not editor.is_installed():
            status = InstallStatus.not_detected
        elif dry_run:
            status = InstallStatus.would_install
        else:
            try:
                editor.install()
            except InstallError as e:
                logger.debug("Install for %s failed: %s", editor.name, e)
                results.append(InstallResult(
                    editor=editor.name, slug=editor.slug,
                    status=InstallStatus.failed, error=str(e),
                ))
                continue
            status = InstallStatus.installed
        results.append(InstallResult(editor=editor.name, slug=editor.slug, status=status))
    return results
