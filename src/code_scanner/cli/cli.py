#!/usr/bin/env python3
"""
code_scanner.cli.cli

Typer-based host surface for the comment scanner.

Examples
--------
Configure the vault once, one field at a time:

    code-scanner --vault ~/notes settings set dir /src/project
    code-scanner --vault ~/notes settings set work scanned

Run the scanner with the stored settings:

    code-scanner --vault ~/notes scan
"""

from __future__ import annotations

import asyncio
import logging
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path

import typer

from code_scanner.adapters.locators import FileSystemExecutableLocator
from code_scanner.adapters.reporters import ModalReporter, NoticeReporter, ToastReporter
from code_scanner.application.options import DEFAULT_CONFIG_DIR
from code_scanner.application.results import Failure, SpawnErrorOutcome, Success
from code_scanner.errors import ExecutableNotFoundError, ExitFailure, ScanError, SpawnError
from code_scanner.platforms import current_platform_id
from code_scanner.schemas import SETTING_FIELDS, SETTING_KEYS

app = typer.Typer(
    name="code-scanner",
    help="Scan text files for comment lines with the bundled scanner.",
    no_args_is_help=True,
)
settings_app = typer.Typer(help="Show and edit the stored scanner settings.")
app.add_typer(settings_app, name="settings")


@dataclass(frozen=True)
class HostContext:
    """Shared CLI state resolved from global options."""

    vault: Path
    config_dir: str
    platform_id: str | None
    debug: bool


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error for a failed command.

    Parameters
    ----------
    exc : Exception
        Exception raised while running the command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code: the error's own ``exit_code`` when it has a
        positive one, otherwise 1.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _host(ctx: typer.Context) -> HostContext:
    return ctx.obj


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    vault: Path = typer.Option(
        Path("."),
        "--vault",
        envvar="CODE_SCANNER_VAULT",
        file_okay=False,
        help="Root directory of the vault.",
    ),
    config_dir: str = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        envvar="CODE_SCANNER_CONFIG_DIR",
        help="Name of the vault's configuration directory.",
    ),
    platform: str | None = typer.Option(
        None,
        "--platform",
        help="Platform identifier override (windows, macos, linux).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Verbose logging and full tracebacks."),
) -> None:
    """Initialize shared CLI state."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    ctx.obj = HostContext(vault=vault, config_dir=config_dir, platform_id=platform, debug=debug)


# -----------------------------
# Commands
# -----------------------------
@app.command("scan")
def scan_cmd(
    ctx: typer.Context,
    modal: bool = typer.Option(
        False,
        "--modal/--toast",
        help="Show titled notices that wait for OK instead of one-line toasts.",
    ),
) -> None:
    """Scan text files for comment lines.

    The exit code is 0 on success, the scanner's own exit code when it
    fails, and the error's exit code when the scan never started.
    """
    host = _host(ctx)
    reporter: NoticeReporter = ModalReporter() if modal else ToastReporter()

    try:
        from code_scanner.api import run_scan

        run = asyncio.run(
            run_scan(
                host.vault,
                reporter,
                config_dir=host.config_dir,
                platform_id=host.platform_id,
            )
        )
    except ScanError as exc:
        raise typer.Exit(code=_print_error(exc, host.debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, host.debug))

    if not run.finished:
        stalled = RuntimeError(f"scan stopped while {run.state.value}")
        raise typer.Exit(code=_print_error(stalled, host.debug))
    if run.abort_reason is not None:
        raise typer.Exit(code=run.abort_reason.exit_code)
    if isinstance(run.outcome, Failure):
        raise typer.Exit(code=ExitFailure(run.outcome.exit_code).exit_code)
    if isinstance(run.outcome, SpawnErrorOutcome):
        raise typer.Exit(code=SpawnError(run.outcome.message).exit_code)
    if not isinstance(run.outcome, Success):
        raise typer.Exit(code=1)


@app.command("doctor")
def doctor_cmd(ctx: typer.Context) -> None:
    """Print the resolved scanner location for this vault.

    Exits with the error's code when the settings are incomplete or the
    platform is unsupported; a missing executable is only reported.
    """
    host = _host(ctx)
    from code_scanner.api import resolve_vault_paths

    platform_id = host.platform_id or current_platform_id()
    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"platform: {platform_id}")
    try:
        paths = resolve_vault_paths(
            host.vault,
            config_dir=host.config_dir,
            platform_id=platform_id,
        )
    except ScanError as exc:
        raise typer.Exit(code=_print_error(exc, host.debug))

    try:
        FileSystemExecutableLocator().locate(paths.executable_path)
        found = True
    except ExecutableNotFoundError:
        found = False
    typer.echo(f"executable: {paths.executable_path}")
    typer.echo(f"executable present: {'yes' if found else 'no'}")
    typer.echo(f"working directory: {paths.working_directory_path}")


@settings_app.command("show")
def settings_show_cmd(ctx: typer.Context) -> None:
    """List every setting with its description and current value."""
    host = _host(ctx)
    from code_scanner.api import load_settings

    try:
        record = load_settings(host.vault, host.config_dir)
    except ScanError as exc:
        raise typer.Exit(code=_print_error(exc, host.debug))

    values = record.model_dump(by_alias=True)
    for field in SETTING_FIELDS:
        value = values[field.key]
        shown = "<unset>" if value is None else repr(value)
        typer.echo(f"{field.key} ({field.name}): {shown}")
        typer.echo(f"    {field.description}")


def _check_key(key: str) -> str:
    if key not in SETTING_KEYS:
        raise typer.BadParameter(
            f"Unknown setting '{key}'. Use one of: {', '.join(SETTING_KEYS)}"
        )
    return key


@settings_app.command("set")
def settings_set_cmd(
    ctx: typer.Context,
    key: str = typer.Argument(..., callback=_check_key, help="Setting key, e.g. dir."),
    value: str = typer.Argument(..., help="New value, saved immediately."),
) -> None:
    """Save a single setting."""
    host = _host(ctx)
    from code_scanner.api import settings_store_for_vault

    try:
        settings_store_for_vault(host.vault, host.config_dir).save_field(key, value)
    except ScanError as exc:
        raise typer.Exit(code=_print_error(exc, host.debug))
    typer.secho(f"✓ Saved {key}", fg=typer.colors.GREEN)


@settings_app.command("unset")
def settings_unset_cmd(
    ctx: typer.Context,
    key: str = typer.Argument(..., callback=_check_key, help="Setting key, e.g. destExtension."),
) -> None:
    """Clear a single setting."""
    host = _host(ctx)
    from code_scanner.api import settings_store_for_vault

    try:
        settings_store_for_vault(host.vault, host.config_dir).save_field(key, None)
    except ScanError as exc:
        raise typer.Exit(code=_print_error(exc, host.debug))
    typer.secho(f"✓ Cleared {key}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
