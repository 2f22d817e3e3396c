"""Asyncio TCP listener for the line protocol."""

from __future__ import annotations

import logging
import asyncio
import functools

from homesync.state import RuntimeDeps
from homesync.handlers.tcp.manager import handle_tcp_connection

logger = logging.getLogger(__name__)


async def start_tcp_server(runtime_deps: RuntimeDeps) -> asyncio.AbstractServer:
    """Bind the listener and record the bound port on `runtime_deps`.

    Bind failures propagate: the broker cannot run without its listening socket.
    """
    broker = runtime_deps.settings.broker
    server = await asyncio.start_server(
        functools.partial(handle_tcp_connection, runtime_deps),
        host=broker.host,
        port=broker.port,
    )
    sockets = server.sockets or ()
    runtime_deps.server = server
    runtime_deps.port = sockets[0].getsockname()[1] if sockets else broker.port
    logger.info("Homesync Online TCP server listening on port %s", runtime_deps.port)
    return server


__all__ = ["start_tcp_server"]
