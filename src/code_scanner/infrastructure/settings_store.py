"""JSON file backed settings store."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from code_scanner.errors import SettingsError
from code_scanner.schemas import SETTING_KEYS, SettingsRecord

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "data.json"


class JsonSettingsStore:
    """Load and save the flat settings record as a JSON document.

    Every edit is written through immediately; there is no batching and no
    validation of values at edit time.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def for_plugin_dir(cls, plugin_dir: Path) -> JsonSettingsStore:
        return cls(plugin_dir / SETTINGS_FILENAME)

    def _read_raw(self) -> dict[str, object]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise SettingsError(f"Unable to read settings from {self.path}: {exc}") from exc
        if not text.strip():
            return {}
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Settings file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise SettingsError(f"Settings file {self.path} must contain a JSON object.")
        return payload

    def load(self) -> SettingsRecord:
        """Load the record, defaulting any missing field to unset."""
        try:
            return SettingsRecord.model_validate(self._read_raw())
        except ValidationError as exc:
            raise SettingsError(f"Invalid settings in {self.path}: {exc}") from exc

    def save_field(self, key: str, value: str | None) -> SettingsRecord:
        """Persist a single field and return the updated record."""
        if key not in SETTING_KEYS:
            raise SettingsError(
                f"Unknown setting '{key}'. Known settings: {', '.join(SETTING_KEYS)}"
            )
        raw = self._read_raw()
        raw[key] = value
        try:
            record = SettingsRecord.model_validate(raw)
        except ValidationError as exc:
            raise SettingsError(f"Invalid settings in {self.path}: {exc}") from exc
        self.save(record)
        logger.debug("saved setting %s", key)
        return record

    def save(self, record: SettingsRecord) -> None:
        """Write the full record."""
        payload = record.model_dump(by_alias=True)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Unable to write settings to {self.path}: {exc}") from exc
