"""Shared CLI utilities to avoid circular imports."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from waka.utils.config import ConfigError, Settings, load_settings
from waka.utils.output import error, error_console

FORMAT_OPTION = typer.Option(None, "--format", "-F", help="Output format: json or text")


def get_settings() -> Settings:
    """Load global settings, exiting with an error message if they are invalid."""
    try:
        return load_settings()
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )
