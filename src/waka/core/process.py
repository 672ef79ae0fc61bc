"""Best-effort check for a running process by name."""

from __future__ import annotations

import logging
import subprocess

from waka.utils.paths import WINDOWS, current_platform

logger = logging.getLogger(__name__)


def is_process_running(process_name: str) -> bool:
    """Return True if a process matching ``process_name`` is running.

    Advisory only: if the lookup command cannot be run the answer is False.
    """
    if current_platform() == WINDOWS:
        image = f"{process_name}.exe"
        try:
            result = subprocess.run(
                ["tasklist", "/FI", f"IMAGENAME eq {image}"],
                capture_output=True, text=True, errors="replace",
            )
        except OSError as e:
            logger.debug("tasklist unavailable: %s", e)
            return False
        return image.lower() in (result.stdout or "").lower()

    try:
        result = subprocess.run(
            ["pgrep", "-i", process_name],
            capture_output=True, text=True, errors="replace",
        )
    except OSError as e:
        logger.debug("pgrep unavailable: %s", e)
        return False
    return result.returncode == 0
