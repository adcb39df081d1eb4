"""Application-layer value objects produced while running a scan."""

from __future__ import annotations

from dataclasses import dataclass

from code_scanner.errors import ScanError
from code_scanner.types import ArgumentVector


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a configuration snapshot."""

    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the recorded error, if any."""
        if self.error is not None:
            raise self.error


@dataclass(frozen=True)
class ResolvedPaths:
    """Absolute scanner executable and working-directory paths."""

    executable_path: str
    working_directory_path: str


@dataclass(frozen=True)
class ProcessInvocation:
    """Everything needed to spawn the scanner once."""

    executable_path: str
    argument_vector: ArgumentVector
    working_directory_path: str


# -----------------------------
# Launcher events
# -----------------------------
@dataclass(frozen=True)
class StdoutChunk:
    data: bytes


@dataclass(frozen=True)
class StderrChunk:
    data: bytes


@dataclass(frozen=True)
class SpawnFailed:
    message: str


@dataclass(frozen=True)
class Closed:
    exit_code: int


type ProcessEvent = StdoutChunk | StderrChunk | SpawnFailed | Closed
TERMINAL_EVENTS = (SpawnFailed, Closed)


# -----------------------------
# Outcomes
# -----------------------------
@dataclass(frozen=True)
class Success:
    message: str = "Scan completed successfully"


@dataclass(frozen=True)
class Failure:
    exit_code: int

    @property
    def message(self) -> str:
        return f"Scan failed with exit code {self.exit_code}"


@dataclass(frozen=True)
class SpawnErrorOutcome:
    message: str


type ProcessOutcome = Success | Failure | SpawnErrorOutcome


def outcome_from_event(event: ProcessEvent) -> ProcessOutcome | None:
    """Translate a terminal launcher event into an outcome.

    Non-terminal events (output chunks) yield ``None``.
    """
    if isinstance(event, Closed):
        if event.exit_code == 0:
            return Success()
        return Failure(exit_code=event.exit_code)
    if isinstance(event, SpawnFailed):
        return SpawnErrorOutcome(message=event.message)
    return None
