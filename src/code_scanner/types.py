"""Shared type aliases for scan orchestration modules."""

from __future__ import annotations

from typing import Literal

type PlatformId = Literal["windows", "macos", "linux"]
type NoticeLevel = Literal["info", "success", "error"]
type SettingKey = Literal["dir", "work", "start", "path", "extension", "destExtension"]
type ArgumentVector = tuple[str, ...]
