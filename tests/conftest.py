"""Shared pytest configuration, marker assignment and scanner fixtures."""

from __future__ import annotations

import stat
from collections.abc import Callable
from pathlib import Path

import pytest

PLUGIN_ID = "code-scanner-ver2"


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """An empty vault directory with its plugin folder created."""
    root = tmp_path / "vault"
    (root / ".obsidian" / "plugins" / PLUGIN_ID).mkdir(parents=True)
    return root


@pytest.fixture
def install_scanner(vault: Path) -> Callable[[str], Path]:
    """Install a POSIX shell script as the linux scanner executable."""

    def _install(body: str) -> Path:
        script = vault / ".obsidian" / "plugins" / PLUGIN_ID / "get-comments-linux"
        script.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _install
