"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

from code_scanner.application.results import ProcessEvent, ProcessInvocation
from code_scanner.errors import ScanError


class BasePathProvider(Protocol):
    """Host capability exposing the project's root directory."""

    def get_base_path(self) -> str:
        """Return the absolute base path of the host project."""


class ExecutableLocator(Protocol):
    """Confirm that the scanner executable exists before spawning."""

    def locate(self, executable_path: str) -> None:
        """Raise ``ExecutableNotFoundError`` when nothing exists at the path."""


class ProcessLauncher(Protocol):
    """Spawn the scanner and expose its lifetime as an event stream."""

    def launch(self, invocation: ProcessInvocation) -> AsyncIterator[ProcessEvent]:
        """Yield output chunks followed by exactly one terminal event."""


class OutcomeReporter(Protocol):
    """Render user-visible notifications for a scan."""

    def report(self, event: ProcessEvent) -> None:
        """Render one notification for a launcher event."""

    def report_error(self, error: ScanError) -> None:
        """Render one notification for a pre-flight failure."""
