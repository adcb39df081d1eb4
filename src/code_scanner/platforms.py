"""Static per-platform facts about the bundled scanner executable."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from code_scanner.types import PlatformId


@dataclass(frozen=True)
class PlatformProfile:
    """Executable name and path separator for one supported platform."""

    platform_id: PlatformId
    executable_file_name: str
    path_separator: str


WINDOWS = PlatformProfile("windows", "get-comments.exe", "\\")
MACOS = PlatformProfile("macos", "get-comments-macos", "/")
LINUX = PlatformProfile("linux", "get-comments-linux", "/")

PROFILES: dict[str, PlatformProfile] = {
    profile.platform_id: profile for profile in (WINDOWS, MACOS, LINUX)
}

_INTERPRETER_PLATFORMS = {
    "win32": "windows",
    "darwin": "macos",
}


def current_platform_id(platform: str | None = None) -> str:
    """Map an interpreter platform string onto a profile identifier.

    Unknown platforms are returned verbatim so that resolution can report
    them back to the user.
    """
    raw = platform if platform is not None else sys.platform
    if raw.startswith("linux"):
        return "linux"
    return _INTERPRETER_PLATFORMS.get(raw, raw)


def get_profile(platform_id: str) -> PlatformProfile | None:
    """Return the profile for ``platform_id`` or ``None`` when unsupported."""
    return PROFILES.get(platform_id)
