"""Trigger the bundled comment scanner from a vault and report its outcome."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from code_scanner.application.options import DEFAULT_CONFIG_DIR, PLUGIN_ID, ScanConfiguration
from code_scanner.errors import ScanError

if TYPE_CHECKING:
    from code_scanner.application.ports import OutcomeReporter
    from code_scanner.application.use_cases import ScanRun

__version__ = "0.2.0"


async def scan_vault(
    vault_path: Path,
    reporter: OutcomeReporter,
    *,
    config_dir: str = DEFAULT_CONFIG_DIR,
    platform_id: str | None = None,
) -> ScanRun:
    """Run the scanner against a vault using its stored settings.

    Parameters
    ----------
    vault_path : Path
        Root directory of the vault.
    reporter : OutcomeReporter
        Receives one notification per scan event.
    config_dir : str, default=".obsidian"
        Name of the vault's configuration directory.
    platform_id : str | None, optional
        Override for the runtime platform identifier.

    Returns
    -------
    ScanRun
        The finished run, either terminated or aborted.
    """
    from .api import run_scan as _impl

    return await _impl(
        vault_path,
        reporter,
        config_dir=config_dir,
        platform_id=platform_id,
    )


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "PLUGIN_ID",
    "ScanConfiguration",
    "ScanError",
    "scan_vault",
]
