"""Process launcher that runs the scanner as an asyncio subprocess."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable

from code_scanner.application.results import (
    Closed,
    ProcessEvent,
    ProcessInvocation,
    SpawnFailed,
    StderrChunk,
    StdoutChunk,
)

logger = logging.getLogger(__name__)

# Matches the largest single read asyncio's pipe transport delivers.
READ_CHUNK_SIZE = 256 * 1024

type _ChunkFactory = Callable[[bytes], ProcessEvent]


async def _pump(
    stream: asyncio.StreamReader,
    make_event: _ChunkFactory,
    queue: asyncio.Queue[ProcessEvent | None],
) -> None:
    """Forward every read from ``stream`` as one event, then a ``None`` marker."""
    try:
        while True:
            data = await stream.read(READ_CHUNK_SIZE)
            if not data:
                break
            await queue.put(make_event(data))
    finally:
        await queue.put(None)


class AsyncioProcessLauncher:
    """Spawn the scanner and stream its pipes as launcher events.

    Each call to :meth:`launch` is independent: there is no shared state
    between invocations, no timeout and no cancellation.
    """

    async def launch(self, invocation: ProcessInvocation) -> AsyncIterator[ProcessEvent]:
        """Run ``invocation`` and yield its events in arrival order.

        Yields
        ------
        ProcessEvent
            ``StdoutChunk``/``StderrChunk`` per pipe read, then exactly one
            ``Closed``. ``SpawnFailed`` replaces all of them when the process
            could not be started.
        """
        logger.info(
            "launching %s %s", invocation.executable_path, " ".join(invocation.argument_vector)
        )
        try:
            proc = await asyncio.create_subprocess_exec(
                invocation.executable_path,
                *invocation.argument_vector,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=READ_CHUNK_SIZE,
            )
        except OSError as exc:
            logger.debug("Failed to start process: %s", exc)
            yield SpawnFailed(message=str(exc))
            return

        assert proc.stdout is not None
        assert proc.stderr is not None
        queue: asyncio.Queue[ProcessEvent | None] = asyncio.Queue()
        pumps = [
            asyncio.create_task(_pump(proc.stdout, StdoutChunk, queue)),
            asyncio.create_task(_pump(proc.stderr, StderrChunk, queue)),
        ]

        open_pipes = len(pumps)
        while open_pipes:
            event = await queue.get()
            if event is None:
                open_pipes -= 1
                continue
            if isinstance(event, StderrChunk):
                logger.debug("stderr: %s", event.data.decode("utf-8", errors="replace"))
            yield event

        await asyncio.gather(*pumps)
        exit_code = await proc.wait()
        logger.info("Process exited with code %s", exit_code)
        yield Closed(exit_code=exit_code)
