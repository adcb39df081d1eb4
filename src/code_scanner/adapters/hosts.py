"""Host adapters exposing the project base path capability."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from code_scanner.application.options import DEFAULT_CONFIG_DIR, PLUGIN_ID


@dataclass(frozen=True)
class FileSystemVault:
    """A host project rooted at a local directory."""

    root: Path
    config_dir: str = DEFAULT_CONFIG_DIR

    def get_base_path(self) -> str:
        return str(self.root.expanduser().resolve())

    def plugin_dir(self, plugin_id: str = PLUGIN_ID) -> Path:
        """Return the installation folder of ``plugin_id`` inside this vault."""
        return Path(self.get_base_path()) / self.config_dir / "plugins" / plugin_id
