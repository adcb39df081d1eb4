"""Typed option objects shared across scan use-cases."""

from __future__ import annotations

from dataclasses import dataclass

PLUGIN_ID = "code-scanner-ver2"
DEFAULT_CONFIG_DIR = ".obsidian"


@dataclass(frozen=True)
class ScanConfiguration:
    """Immutable snapshot of the scanner settings taken at trigger time.

    ``None`` marks a field the user has not configured.
    """

    scan_root: str | None = None
    work_folder: str | None = None
    line_start_marker: str | None = None
    folder_structure: str | None = None
    source_extension: str | None = None
    dest_extension: str | None = None


@dataclass(frozen=True)
class HostOptions:
    """Host-supplied facts used to locate the scanner installation."""

    config_dir: str = DEFAULT_CONFIG_DIR
    plugin_id: str = PLUGIN_ID
    platform_id: str | None = None
