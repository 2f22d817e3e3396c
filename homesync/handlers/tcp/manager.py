"""Primary TCP connection handler orchestration."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from homesync.state import RuntimeDeps

from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


def format_peer(peername: Any) -> str:
    if isinstance(peername, tuple) and len(peername) >= 2:
        return f"{peername[0]}:{peername[1]}"
    return str(peername or "unknown")


async def handle_tcp_connection(
    runtime_deps: RuntimeDeps,
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
) -> None:
    remote = format_peer(writer.get_extra_info("peername"))
    conn = runtime_deps.connections.admit(writer, remote)
    logger.info(
        "client:%s connected %s active=%s",
        conn.client_id,
        remote,
        runtime_deps.connections.get_connection_count(),
    )

    had_error = False
    try:
        await run_message_loop(runtime_deps, conn, reader)
    except OSError as exc:
        had_error = True
        logger.warning("client:%s socket error %s: %s", conn.client_id, remote, exc)
    finally:
        runtime_deps.connections.evict(conn)
        purged = runtime_deps.pending.purge_connection(conn)
        logger.info(
            "client:%s closed %s hadError=%s purged=%s active=%s",
            conn.client_id,
            remote,
            had_error,
            purged,
            runtime_deps.connections.get_connection_count(),
        )


__all__ = ["format_peer", "handle_tcp_connection"]
