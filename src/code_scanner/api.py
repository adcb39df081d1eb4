"""Public scan API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from code_scanner.adapters.hosts import FileSystemVault
from code_scanner.application.options import DEFAULT_CONFIG_DIR, PLUGIN_ID, HostOptions
from code_scanner.application.ports import OutcomeReporter, ProcessLauncher
from code_scanner.application.results import ProcessOutcome, ResolvedPaths
from code_scanner.application.use_cases import (
    ScanOrchestrator,
    ScanRun,
    resolve_paths,
    validate_configuration,
)
from code_scanner.infrastructure.settings_store import JsonSettingsStore
from code_scanner.platforms import current_platform_id
from code_scanner.schemas import SettingsRecord


def settings_store_for_vault(
    vault_path: Path, config_dir: str = DEFAULT_CONFIG_DIR
) -> JsonSettingsStore:
    """Return the settings store that lives in the vault's plugin folder."""
    vault = FileSystemVault(root=vault_path, config_dir=config_dir)
    return JsonSettingsStore.for_plugin_dir(vault.plugin_dir(PLUGIN_ID))


def load_settings(vault_path: Path, config_dir: str = DEFAULT_CONFIG_DIR) -> SettingsRecord:
    """Load the persisted settings record for a vault."""
    return settings_store_for_vault(vault_path, config_dir).load()


def build_orchestrator(
    vault_path: Path,
    reporter: OutcomeReporter,
    *,
    config_dir: str = DEFAULT_CONFIG_DIR,
    platform_id: str | None = None,
    launcher: ProcessLauncher | None = None,
) -> ScanOrchestrator:
    """Create an orchestrator bound to a local vault."""
    return ScanOrchestrator(
        host=FileSystemVault(root=vault_path, config_dir=config_dir),
        reporter=reporter,
        options=HostOptions(config_dir=config_dir, platform_id=platform_id),
        launcher=launcher,
    )


def resolve_vault_paths(
    vault_path: Path,
    *,
    config_dir: str = DEFAULT_CONFIG_DIR,
    platform_id: str | None = None,
) -> ResolvedPaths:
    """Resolve executable and working-directory paths from stored settings.

    Nothing is reported and the executable is not looked up.

    Raises
    ------
    ConfigurationIncomplete
        If no scan root is stored.
    UnsupportedPlatformError
        If the platform has no scanner build.
    """
    config = load_settings(vault_path, config_dir).to_configuration()
    validate_configuration(config).raise_for_error()
    vault = FileSystemVault(root=vault_path, config_dir=config_dir)
    return resolve_paths(
        platform_id or current_platform_id(),
        vault.get_base_path(),
        config_dir,
        PLUGIN_ID,
        config.work_folder,
    )


async def run_scan(
    vault_path: Path,
    reporter: OutcomeReporter,
    *,
    config_dir: str = DEFAULT_CONFIG_DIR,
    platform_id: str | None = None,
    launcher: ProcessLauncher | None = None,
) -> ScanRun:
    """Trigger a scan with the vault's stored settings and wait for it to end."""
    orchestrator = build_orchestrator(
        vault_path,
        reporter,
        config_dir=config_dir,
        platform_id=platform_id,
        launcher=launcher,
    )
    config = load_settings(vault_path, config_dir).to_configuration()
    run = orchestrator.trigger(config)
    await run.wait()
    return run


__all__ = [
    "ProcessOutcome",
    "build_orchestrator",
    "load_settings",
    "resolve_vault_paths",
    "run_scan",
    "settings_store_for_vault",
]
