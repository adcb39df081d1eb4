"""Unit tests for the settings record and its JSON store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from code_scanner.errors import SettingsError
from code_scanner.infrastructure.settings_store import JsonSettingsStore
from code_scanner.schemas import SETTING_KEYS, SettingsRecord


def test_missing_file_loads_defaults(tmp_path: Path) -> None:
    record = JsonSettingsStore(tmp_path / "data.json").load()
    assert record == SettingsRecord()
    assert record.to_configuration().scan_root is None


def test_missing_keys_default_to_unset(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"dir": "/notes", "someOtherPlugin": 1}))

    config = JsonSettingsStore(path).load().to_configuration()

    assert config.scan_root == "/notes"
    assert config.work_folder is None
    assert config.dest_extension is None


def test_legacy_unknown_placeholder_is_unset(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({key: "UNKNOWN" for key in SETTING_KEYS}))

    config = JsonSettingsStore(path).load().to_configuration()

    assert config.scan_root is None
    assert config.dest_extension is None


def test_save_field_writes_through_immediately(tmp_path: Path) -> None:
    path = tmp_path / "plugin" / "data.json"
    store = JsonSettingsStore(path)

    store.save_field("dir", "/notes")
    store.save_field("destExtension", ".md")

    on_disk = json.loads(path.read_text())
    assert on_disk["dir"] == "/notes"
    assert on_disk["destExtension"] == ".md"
    assert on_disk["work"] is None
    assert store.load().to_configuration().dest_extension == ".md"


def test_save_field_unset(tmp_path: Path) -> None:
    store = JsonSettingsStore(tmp_path / "data.json")
    store.save_field("start", "// ")
    record = store.save_field("start", None)
    assert record.start is None


def test_unknown_field_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Unknown setting"):
        JsonSettingsStore(tmp_path / "data.json").save_field("color", "red")


def test_corrupt_file_raises_settings_error(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("{not json")
    with pytest.raises(SettingsError, match="not valid JSON"):
        JsonSettingsStore(path).load()


def test_non_string_value_raises_settings_error(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"dir": ["a"]}))
    with pytest.raises(SettingsError, match="Invalid settings"):
        JsonSettingsStore(path).load()


def test_snapshot_is_immutable() -> None:
    config = SettingsRecord(dir="/notes").to_configuration()
    with pytest.raises(AttributeError):
        config.scan_root = "/elsewhere"  # type: ignore[misc]
