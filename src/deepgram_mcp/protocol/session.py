"""StdioSession: the sequential read/dispatch/write loop.

Reads one newline-delimited JSON-RPC message at a time, dispatches it, and
writes the response before reading the next line. Requests are never
processed concurrently, so responses leave in the order requests arrived.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

from deepgram_mcp.protocol import codec
from deepgram_mcp.protocol.errors import DecodeError, TransportError

if TYPE_CHECKING:
    from deepgram_mcp.protocol.dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)

_EXCERPT_LEN = 200


@runtime_checkable
class LineReader(Protocol):
    """Anything that yields one line (with its terminator) per call; ``b""`` at EOF."""

    async def readline(self) -> bytes: ...


class ThreadedLineReader:
    """Adapts a blocking binary stream (e.g. ``sys.stdin.buffer``) to :class:`LineReader`.

    Each read runs in a worker thread so the event loop stays responsive.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    async def readline(self) -> bytes:
        return await asyncio.to_thread(self._stream.readline)


@dataclass
class SessionStats:
    """Counters reported when a session ends."""

    received: int = 0
    answered: int = 0
    skipped: int = 0


class StdioSession:
    """Runs the request loop over a line reader and a binary writer.

    Usage::

        session = StdioSession(dispatcher, ThreadedLineReader(sys.stdin.buffer), sys.stdout.buffer)
        stats = await session.run()
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        reader: LineReader,
        writer: BinaryIO,
    ) -> None:
        self._dispatcher = dispatcher
        self._reader = reader
        self._writer = writer

    async def run(self) -> SessionStats:
        """Serve requests until end of stream.

        Raises:
            TransportError: If reading the input or writing the output fails.
        """
        stats = SessionStats()
        logger.info("Session started")

        while True:
            line = await self._read_line()
            if not line:
                break
            if codec.is_blank(line):
                continue

            stats.received += 1
            try:
                request = codec.decode(line)
            except DecodeError as exc:
                stats.skipped += 1
                logger.warning("%s (line: %s)", exc, _excerpt(line))
                continue

            response = await self._dispatcher.dispatch(request)
            self._write_line(codec.encode(response))
            stats.answered += 1

        logger.info(
            "Session ended: %d received, %d answered, %d skipped",
            stats.received,
            stats.answered,
            stats.skipped,
        )
        return stats

    async def _read_line(self) -> bytes:
        try:
            return await self._reader.readline()
        except (OSError, ValueError) as exc:
            # ValueError covers asyncio.StreamReader's line-length limit.
            logger.error("Failed to read line: %s", exc)
            raise TransportError(f"Failed to read line: {exc}") from exc

    def _write_line(self, payload: str) -> None:
        try:
            self._writer.write(payload.encode("utf-8") + b"\n")
            self._writer.flush()
        except OSError as exc:
            logger.error("Failed to write response: %s", exc)
            raise TransportError(f"Failed to write response: {exc}") from exc


def _excerpt(line: bytes) -> str:
    text = line.decode("utf-8", errors="replace").strip()
    if len(text) <= _EXCERPT_LEN:
        return text
    return text[: _EXCERPT_LEN - 3] + "..."
