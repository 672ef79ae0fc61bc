"""Config subcommands: get, set, list for global waka-install settings."""

from __future__ import annotations

from typing import Optional

import typer

from waka.cli._shared import FORMAT_OPTION
from waka.editors.registry import editor_slugs
from waka.utils.config import ConfigError, load_global_config, save_global_config
from waka.utils.output import error, info, output, success

config_app = typer.Typer(no_args_is_help=True)

_VALID_KEYS = ("skip_editors", "verbose")


def _load() -> dict:
    try:
        return load_global_config()
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)


def _check_key(key: str) -> None:
    if key not in _VALID_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(_VALID_KEYS)}")
        raise typer.Exit(1)


def _parse_value(key: str, value: str):
    if key == "verbose":
        lowered = value.strip().lower()
        if lowered not in ("true", "false"):
            error(f"Invalid value for verbose: {value}. Valid values: false, true")
            raise typer.Exit(1)
        return lowered == "true"

    slugs = [s.strip() for s in value.split(",") if s.strip()]
    unknown = [s for s in slugs if s not in editor_slugs()]
    if unknown:
        error(f"Unknown editor(s): {', '.join(unknown)}. Valid editors: {', '.join(editor_slugs())}")
        raise typer.Exit(1)
    return slugs


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a configuration value."""
    _check_key(key)
    value = _load().get(key)
    if fmt == "json":
        output({"key": key, "value": value}, fmt="json")
    elif value is None:
        info(f"{key}: (not set)")
    else:
        info(f"{key}: {value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set (comma separated slugs for skip_editors)"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a configuration value."""
    _check_key(key)
    parsed = _parse_value(key, value)

    config = _load()
    config[key] = parsed
    save_global_config(config)

    if fmt == "json":
        output({"key": key, "value": parsed}, fmt="json")
    else:
        success(f"{key} = {parsed}")


@config_app.command("list")
def config_list(
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List all configuration values."""
    config = _load()
    if fmt == "json":
        output(config, fmt="json")
    elif config:
        for k, v in sorted(config.items()):
            info(f"{k}: {v}")
    else:
        info("No configuration set")
