"""Read-modify-write of JSON-with-comments settings files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from waka.core import jsonc
from waka.core.errors import ConfigParseError, ConfigShapeError, ConfigWriteError

logger = logging.getLogger(__name__)


def read_settings_text(path: Path) -> str:
    """Return the file's text, or ``{}`` if it is missing or blank."""
    if not path.exists():
        return "{}"
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, f"not valid UTF-8: {e}")
    except OSError as e:
        raise ConfigWriteError(path, str(e), action="read")
    if not content.strip():
        return "{}"
    return content


def patch_settings(path: Path, key_path: Sequence[str], value: Any) -> str:
    """Set ``key_path`` to ``value`` in the JSONC file at ``path``.

    Comments, key order and formatting elsewhere in the file are kept.
    Missing intermediate objects are created; an existing non-object along
    the path is an error. Nothing is written unless the edit succeeds.
    Returns the new file content.
    """
    original = read_settings_text(path)
    try:
        updated = jsonc.set_value(original, key_path, value)
    except jsonc.JsoncError as e:
        raise ConfigParseError(path, e.message, e.line, e.column)
    except jsonc.JsoncShapeError as e:
        raise ConfigShapeError(f"{path}: {e}")
    except RecursionError:
        raise ConfigParseError(path, "document nested too deeply")

    if original == "{}":
        updated += "\n"

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(updated, encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(path, str(e))

    logger.debug("Patched %s at %s", path, ".".join(key_path))
    return updated
