"""EditorPlugin: the detect/install contract every editor adapter implements."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from waka.core.errors import InstallCommandFailedError, InstallCommandSpawnError

logger = logging.getLogger(__name__)


@runtime_checkable
class EditorPlugin(Protocol):
    """Interface that all editor adapters must implement."""

    name: str
    slug: str

    def is_installed(self) -> bool:
        """Check if the editor is present on this machine. Never raises."""
        ...

    def install(self) -> None:
        """Install the WakaTime plugin. Raises InstallError on failure."""
        ...


def run_installer(editor: str, cli: Path, argv: list[str]) -> None:
    """Run an editor's CLI installer once and classify the outcome."""
    logger.debug("Running %s", " ".join(argv))
    try:
        result = subprocess.run(argv, capture_output=True, text=True, errors="replace")
    except OSError as e:
        raise InstallCommandSpawnError(editor, cli, str(e))

    if result.returncode != 0:
        detail = (result.stderr or "").strip().splitlines()
        logger.debug("%s installer stderr: %s", editor, result.stderr)
        raise InstallCommandFailedError(editor, result.returncode, detail[-1] if detail else "")
