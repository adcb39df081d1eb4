"""User-facing reporters that turn scan events into notices."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from code_scanner.application.results import (
    Closed,
    ProcessEvent,
    SpawnFailed,
    StderrChunk,
    StdoutChunk,
)
from code_scanner.errors import ScanError
from code_scanner.types import NoticeLevel

_LEVEL_COLORS: dict[str, str] = {
    "info": typer.colors.WHITE,
    "success": typer.colors.GREEN,
    "error": typer.colors.RED,
}


@dataclass(frozen=True)
class Notice:
    """One notification shown to the user."""

    level: NoticeLevel
    title: str
    message: str


def decode_chunk(data: bytes) -> str:
    """Render raw pipe bytes as text, replacing undecodable sequences."""
    return data.decode("utf-8", errors="replace").rstrip("\r\n")


def notice_for_event(event: ProcessEvent) -> Notice:
    """Build the notice for a single launcher event."""
    if isinstance(event, StdoutChunk):
        return Notice("info", "Scan Output", decode_chunk(event.data))
    if isinstance(event, StderrChunk):
        return Notice("error", "Process Error", f"Error: {decode_chunk(event.data)}")
    if isinstance(event, SpawnFailed):
        return Notice("error", "Process Failed", f"Failed to start process: {event.message}")
    if isinstance(event, Closed):
        if event.exit_code == 0:
            return Notice("success", "Scan Complete", "Scan completed successfully")
        return Notice("error", "Scan Failed", f"Scan failed with exit code {event.exit_code}")
    raise TypeError(f"unknown scan event: {event!r}")


def notice_for_error(error: ScanError) -> Notice:
    """Build the notice for a pre-flight failure."""
    return Notice("error", error.title, str(error))


class NoticeReporter:
    """Base reporter: one notice per event, rendered by :meth:`show`."""

    def report(self, event: ProcessEvent) -> None:
        self.show(notice_for_event(event))

    def report_error(self, error: ScanError) -> None:
        self.show(notice_for_error(error))

    def show(self, notice: Notice) -> None:
        raise NotImplementedError


class ToastReporter(NoticeReporter):
    """Transient one-line notices."""

    def show(self, notice: Notice) -> None:
        typer.secho(
            notice.message,
            fg=_LEVEL_COLORS[notice.level],
            err=notice.level == "error",
        )


class ModalReporter(NoticeReporter):
    """Titled notices that wait for an OK acknowledgement.

    :meth:`show` blocks until the user presses Enter, so the orchestrator
    calls reporters from a worker thread. The acknowledgement is skipped
    when stdin is not interactive.
    """

    def show(self, notice: Notice) -> None:
        typer.secho(notice.title, fg=_LEVEL_COLORS[notice.level], bold=True)
        typer.echo(notice.message)
        typer.pause("Press Enter for OK...")
