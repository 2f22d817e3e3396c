"""Read loop: socket chunks -> framed lines -> dispatch, in arrival order."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from homesync.state import Connection, RuntimeDeps

from .dispatch import handle_line
from .framing import LineFramer

logger = logging.getLogger(__name__)


async def _drain(conn: Connection) -> bool:
    drain = getattr(conn.stream, "drain", None)
    if drain is None:
        return True
    try:
        await drain()
    except (ConnectionError, OSError):
        return False
    return True


async def run_message_loop(runtime_deps: RuntimeDeps, conn: Connection, reader: asyncio.StreamReader) -> int:
    """Serve one client until EOF or QUIT; returns the number of lines dispatched."""
    framer = LineFramer()
    chunk_size = runtime_deps.settings.broker.read_chunk_bytes
    handled = 0

    try:
        while True:
            chunk = await reader.read(chunk_size)
            if not chunk:
                if framer.pending:
                    logger.debug("client:%s dropped %s unterminated byte(s)", conn.client_id, len(framer.pending))
                return handled

            for line in framer.feed(chunk):
                handled += 1
                if handle_line(runtime_deps, conn, line) == "close":
                    return handled

            if not await _drain(conn):
                return handled
    finally:
        with contextlib.suppress(Exception):
            conn.stream.close()


__all__ = ["run_message_loop"]
