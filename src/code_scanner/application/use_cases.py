"""Application use-cases orchestrating a scanner run."""

from __future__ import annotations

import asyncio
import enum
import logging

from code_scanner.adapters.launchers import AsyncioProcessLauncher
from code_scanner.adapters.locators import FileSystemExecutableLocator
from code_scanner.application.options import HostOptions, ScanConfiguration
from code_scanner.application.ports import (
    BasePathProvider,
    ExecutableLocator,
    OutcomeReporter,
    ProcessLauncher,
)
from code_scanner.application.results import (
    TERMINAL_EVENTS,
    ProcessInvocation,
    ProcessOutcome,
    ResolvedPaths,
    SpawnFailed,
    ValidationResult,
    outcome_from_event,
)
from code_scanner.errors import (
    ConfigurationIncomplete,
    ScanError,
    UnsupportedPlatformError,
)
from code_scanner.platforms import current_platform_id, get_profile
from code_scanner.types import ArgumentVector

logger = logging.getLogger(__name__)


# -----------------------------
# Pre-flight steps
# -----------------------------
def validate_configuration(config: ScanConfiguration) -> ValidationResult:
    """Check that ``config`` is complete enough to start a scan.

    Only the scan root is required; every other field is passed through and
    surfaces as an empty argument when unset.
    """
    if config.scan_root is None:
        return ValidationResult(error=ConfigurationIncomplete())
    return ValidationResult()


def join_path(separator: str, *parts: str) -> str:
    """Join path segments with ``separator`` without doubling it at the seams."""
    if not parts:
        return ""
    head, *rest = parts
    pieces = [head.rstrip(separator)]
    pieces.extend(part.strip(separator) for part in rest if part.strip(separator))
    return separator.join(pieces)


def normalize_work_folder(work_folder: str, separator: str) -> str:
    """Return ``work_folder`` with exactly one leading separator."""
    return separator + work_folder.lstrip(separator)


def resolve_paths(
    platform_id: str,
    base_path: str,
    config_dir: str,
    plugin_id: str,
    work_folder: str | None,
) -> ResolvedPaths:
    """Compute the scanner executable and working-directory paths.

    Raises
    ------
    UnsupportedPlatformError
        If ``platform_id`` has no platform profile.
    """
    profile = get_profile(platform_id)
    if profile is None:
        raise UnsupportedPlatformError(platform_id)

    sep = profile.path_separator
    plugin_root = join_path(sep, base_path, config_dir, "plugins", plugin_id)
    executable_path = join_path(sep, plugin_root, profile.executable_file_name)
    normalized = normalize_work_folder(work_folder or "", sep)
    return ResolvedPaths(
        executable_path=executable_path,
        working_directory_path=base_path.rstrip(sep) + normalized,
    )


def build_argument_vector(
    config: ScanConfiguration, working_directory_path: str
) -> ArgumentVector:
    """Build the scanner flags in their fixed order.

    ``-dest`` is emitted only when a destination extension is configured.
    """
    args = [
        "-dir",
        config.scan_root or "",
        "-start",
        config.line_start_marker or "",
        "-path",
        config.folder_structure or "",
        "-ext",
        config.source_extension or "",
    ]
    if config.dest_extension is not None:
        args.extend(["-dest", config.dest_extension])
    args.extend(["-work", working_directory_path])
    return tuple(args)


def build_invocation(config: ScanConfiguration, paths: ResolvedPaths) -> ProcessInvocation:
    """Bundle resolved paths and flags into a single invocation."""
    return ProcessInvocation(
        executable_path=paths.executable_path,
        argument_vector=build_argument_vector(config, paths.working_directory_path),
        working_directory_path=paths.working_directory_path,
    )


# -----------------------------
# Run state machine
# -----------------------------
class ScanState(enum.Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING = "resolving"
    LOCATING = "locating"
    LAUNCHING = "launching"
    RUNNING = "running"
    TERMINATED = "terminated"
    ABORTED = "aborted"


_ALLOWED_TRANSITIONS: dict[ScanState, frozenset[ScanState]] = {
    ScanState.IDLE: frozenset({ScanState.VALIDATING}),
    ScanState.VALIDATING: frozenset({ScanState.RESOLVING, ScanState.ABORTED}),
    ScanState.RESOLVING: frozenset({ScanState.LOCATING, ScanState.ABORTED}),
    ScanState.LOCATING: frozenset({ScanState.LAUNCHING, ScanState.ABORTED}),
    ScanState.LAUNCHING: frozenset({ScanState.RUNNING, ScanState.TERMINATED}),
    ScanState.RUNNING: frozenset({ScanState.TERMINATED}),
    ScanState.TERMINATED: frozenset(),
    ScanState.ABORTED: frozenset(),
}


class ScanRun:
    """State of a single triggered scan.

    A run is created per trigger and never reused. Pre-flight failures leave
    it in ``ABORTED`` with ``abort_reason`` set; otherwise it ends in
    ``TERMINATED`` with ``outcome`` set once the scanner's event stream
    reaches its terminal event.
    """

    def __init__(self) -> None:
        self.state = ScanState.IDLE
        self.history: list[ScanState] = [ScanState.IDLE]
        self.paths: ResolvedPaths | None = None
        self.invocation: ProcessInvocation | None = None
        self.outcome: ProcessOutcome | None = None
        self.abort_reason: ScanError | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def finished(self) -> bool:
        """Whether the run reached ``TERMINATED`` or ``ABORTED``."""
        return self.state in {ScanState.TERMINATED, ScanState.ABORTED}

    def _transition(self, state: ScanState) -> None:
        if state not in _ALLOWED_TRANSITIONS[self.state]:
            raise RuntimeError(f"invalid scan transition {self.state.value} -> {state.value}")
        logger.debug("scan state %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _abort(self, reason: ScanError) -> None:
        self.abort_reason = reason
        self._transition(ScanState.ABORTED)

    async def wait(self) -> ProcessOutcome | None:
        """Wait for the scanner to terminate and return its outcome.

        Returns ``None`` for aborted runs.
        """
        if self._task is not None:
            await self._task
        return self.outcome


class ScanOrchestrator:
    """Compose validation, resolution, location and launch into one trigger."""

    def __init__(
        self,
        *,
        host: BasePathProvider,
        reporter: OutcomeReporter,
        options: HostOptions | None = None,
        launcher: ProcessLauncher | None = None,
        locator: ExecutableLocator | None = None,
    ) -> None:
        self.host = host
        self.reporter = reporter
        self.options = options or HostOptions()
        self.launcher = launcher or AsyncioProcessLauncher()
        self.locator = locator or FileSystemExecutableLocator()

    @property
    def platform_id(self) -> str:
        return self.options.platform_id or current_platform_id()

    def prepare(self, config: ScanConfiguration) -> ResolvedPaths:
        """Validate ``config`` and resolve paths without touching the disk."""
        validate_configuration(config).raise_for_error()
        return resolve_paths(
            self.platform_id,
            self.host.get_base_path(),
            self.options.config_dir,
            self.options.plugin_id,
            config.work_folder,
        )

    def trigger(self, config: ScanConfiguration) -> ScanRun:
        """Start a scan for ``config``.

        Pre-flight steps run synchronously; the scanner itself is launched as
        a task on the running event loop and this method returns without
        waiting for it. Must be called from within a running loop.
        """
        run = ScanRun()
        try:
            run._transition(ScanState.VALIDATING)
            validate_configuration(config).raise_for_error()

            run._transition(ScanState.RESOLVING)
            run.paths = resolve_paths(
                self.platform_id,
                self.host.get_base_path(),
                self.options.config_dir,
                self.options.plugin_id,
                config.work_folder,
            )

            run._transition(ScanState.LOCATING)
            self.locator.locate(run.paths.executable_path)
        except ScanError as exc:
            logger.debug("scan aborted: %s", exc)
            run._abort(exc)
            self.reporter.report_error(exc)
            return run

        run.invocation = build_invocation(config, run.paths)
        run._transition(ScanState.LAUNCHING)
        loop = asyncio.get_running_loop()
        run._task = loop.create_task(self._drive(run, run.invocation))
        return run

    async def _drive(self, run: ScanRun, invocation: ProcessInvocation) -> None:
        """Report each launcher event in order from a worker thread."""
        async for event in self.launcher.launch(invocation):
            terminal = isinstance(event, TERMINAL_EVENTS)
            if run.state is ScanState.LAUNCHING and not isinstance(event, SpawnFailed):
                run._transition(ScanState.RUNNING)
            await asyncio.to_thread(self.reporter.report, event)
            if terminal:
                run.outcome = outcome_from_event(event)
                run._transition(ScanState.TERMINATED)
                return
        raise RuntimeError("scanner event stream ended without a terminal event")
