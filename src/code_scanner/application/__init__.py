"""Application-layer use-cases and option objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from code_scanner.application.options import HostOptions, ScanConfiguration
from code_scanner.application.ports import (
    BasePathProvider,
    ExecutableLocator,
    OutcomeReporter,
    ProcessLauncher,
)
from code_scanner.application.results import (
    Closed,
    Failure,
    ProcessInvocation,
    ResolvedPaths,
    SpawnErrorOutcome,
    SpawnFailed,
    StderrChunk,
    StdoutChunk,
    Success,
)

if TYPE_CHECKING:
    from code_scanner.application.use_cases import ScanOrchestrator


def create_orchestrator(
    *,
    host: BasePathProvider,
    reporter: OutcomeReporter,
    options: HostOptions | None = None,
    launcher: ProcessLauncher | None = None,
    locator: ExecutableLocator | None = None,
) -> ScanOrchestrator:
    """Build a scan orchestrator via lazy use-case import."""
    from code_scanner.application.use_cases import ScanOrchestrator

    return ScanOrchestrator(
        host=host,
        reporter=reporter,
        options=options,
        launcher=launcher,
        locator=locator,
    )


__all__ = [
    "HostOptions",
    "ScanConfiguration",
    "ResolvedPaths",
    "ProcessInvocation",
    "StdoutChunk",
    "StderrChunk",
    "SpawnFailed",
    "Closed",
    "Success",
    "Failure",
    "SpawnErrorOutcome",
    "create_orchestrator",
]
