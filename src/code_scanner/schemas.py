"""Pydantic schemas for the persisted scanner settings record."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from code_scanner.application.options import ScanConfiguration
from code_scanner.types import SettingKey

LEGACY_UNSET = "UNKNOWN"


@dataclass(frozen=True)
class SettingField:
    """Display metadata for one settings field."""

    key: SettingKey
    name: str
    description: str
    placeholder: str


SETTING_FIELDS: tuple[SettingField, ...] = (
    SettingField("dir", "Folder", "Location of text file to scan", "Enter your text file start folder"),
    SettingField("work", "Working folder", "Location of md files", "Enter your working folder name"),
    SettingField("start", "Start", "The start of line to extract to md file", "Enter your start string"),
    SettingField(
        "path",
        "Folder structure",
        "The folder structure definition",
        "Enter your dot separated folder structure definition",
    ),
    SettingField(
        "extension",
        "Extension",
        "Extension of the source text files to scan",
        "Enter your text file extension",
    ),
    SettingField(
        "destExtension",
        "Destination file extension",
        "Extension of the destination files into which extracted text goes",
        "Enter your destination file extension",
    ),
)
SETTING_KEYS: tuple[str, ...] = tuple(field.key for field in SETTING_FIELDS)


class SettingsRecord(BaseModel):
    """Flat settings record as stored on disk.

    ``None`` marks an unset field. The legacy ``"UNKNOWN"`` placeholder is
    read as unset.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    dir: str | None = None
    work: str | None = None
    start: str | None = None
    path: str | None = None
    extension: str | None = None
    dest_extension: str | None = Field(default=None, alias="destExtension")

    @field_validator("*", mode="before")
    @classmethod
    def _drop_legacy_unset(cls, value: object) -> object:
        if value == LEGACY_UNSET:
            return None
        return value

    def to_configuration(self) -> ScanConfiguration:
        """Snapshot this record as an immutable scan configuration."""
        return ScanConfiguration(
            scan_root=self.dir,
            work_folder=self.work,
            line_start_marker=self.start,
            folder_structure=self.path,
            source_extension=self.extension,
            dest_extension=self.dest_extension,
        )
