"""Error taxonomy for scan orchestration.

Every error carries a short user-facing ``title`` and an ``exit_code`` that
the CLI uses as its own process exit status.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base class for all scan orchestration failures."""

    title = "Scan Error"
    exit_code = 1


class ConfigurationIncomplete(ScanError):
    """Raised when the configuration is not complete enough to run a scan."""

    title = "Configuration Required"
    exit_code = 2

    def __init__(self, message: str = "Please configure plugin before using") -> None:
        super().__init__(message)


class UnsupportedPlatformError(ScanError):
    """Raised when no platform profile exists for the runtime platform."""

    title = "Unsupported Platform"
    exit_code = 3

    def __init__(self, platform_id: str) -> None:
        self.platform_id = platform_id
        super().__init__(f"Unsupported platform: {platform_id}")


class ExecutableNotFoundError(ScanError):
    """Raised when the scanner executable is missing on disk."""

    title = "Executable Not Found"
    exit_code = 4

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Executable not found: {path}")


class SpawnError(ScanError):
    """Raised when the operating system could not start the scanner."""

    title = "Process Failed"
    exit_code = 5

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Failed to start process: {message}")


class ExitFailure(ScanError):
    """Raised when the scanner terminated with a nonzero exit code."""

    title = "Scan Failed"

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Scan failed with exit code {code}")

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        # Negative codes (signals) cannot be used as a process status.
        return self.code if 0 < self.code < 256 else 1


class SettingsError(ScanError):
    """Raised when the persisted settings record cannot be read or written."""

    title = "Settings Error"
    exit_code = 6
