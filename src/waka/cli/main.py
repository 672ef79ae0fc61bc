"""Typer app: root options and the list/install commands."""

from __future__ import annotations

from typing import List, Optional

import typer

import waka
from waka.cli._shared import FORMAT_OPTION, get_settings, setup_logging
from waka.core.installer import InstallStatus, detect_editors, install_plugins
from waka.editors.registry import editor_slugs, get_editors, list_editors
from waka.utils.config import ConfigError, load_settings
from waka.utils.output import error, info, output, output_table, success, warn

app = typer.Typer(
    name="waka-install",
    help="Detect installed code editors and install the WakaTime plugin into them.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(waka.__version__)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    try:
        configured = load_settings().verbose
    except ConfigError:
        configured = False
    setup_logging(verbose or configured)


@app.command("list")
def list_cmd(fmt: Optional[str] = FORMAT_OPTION) -> None:
    """Show every known editor and whether it was detected."""
    rows = detect_editors(list_editors())
    if fmt == "json":
        output(rows, fmt="json")
        return
    output_table(
        [{**r, "installed": "yes" if r["installed"] else "no"} for r in rows],
        ["editor", "slug", "installed"],
        fmt="text",
    )


@app.command("install")
def install_cmd(
    editors: Optional[List[str]] = typer.Argument(
        None, help="Editor slugs (all known editors if omitted). See `waka-install list`.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be installed"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Install the WakaTime plugin into detected editors."""
    settings = get_settings()
    if editors:
        try:
            targets = get_editors(editors)
        except KeyError as e:
            error(f"Unknown editor: {e.args[0]}. Valid editors: {', '.join(editor_slugs())}")
            raise typer.Exit(1)
    else:
        targets = list_editors()

    results = install_plugins(targets, skip=settings.skip_editors, dry_run=dry_run)

    if fmt == "json":
        output(results, fmt="json")
    else:
        for r in results:
            if r.status == InstallStatus.installed:
                success(f"Installed WakaTime for {r.editor}")
            elif r.status == InstallStatus.would_install:
                info(f"Would install WakaTime for {r.editor}")
            elif r.status == InstallStatus.failed:
                error(r.error)
            elif r.status == InstallStatus.skipped:
                info(f"Skipped {r.editor} (skip_editors)")
            elif editors:
                warn(f"{r.editor} was not detected")
        if not any(r.status != InstallStatus.not_detected for r in results):
            info("No supported editors detected")

    if any(r.status == InstallStatus.failed for r in results):
        raise typer.Exit(1)


# Register subcommand groups
from waka.cli.config_cmd import config_app

app.add_typer(config_app, name="config", help="Manage global configuration")
