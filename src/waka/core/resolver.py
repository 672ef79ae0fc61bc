"""CLI resolution: search-path lookup with ordered fallback locations."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve_cli(command: str, fallback_paths: Iterable[Path]) -> Path | None:
    """Find an executable for ``command``.

    A hit on PATH is authoritative and short-circuits the fallbacks.
    Otherwise the first fallback that exists on disk wins. Nothing is
    cached; every call checks again.
    """
    found = shutil.which(command)
    if found:
        logger.debug("Resolved %s on PATH: %s", command, found)
        return Path(found)

    for candidate in fallback_paths:
        try:
            if candidate.exists():
                logger.debug("Resolved %s via fallback: %s", command, candidate)
                return candidate
        except OSError:
            continue

    logger.debug("Could not resolve %s", command)
    return None
