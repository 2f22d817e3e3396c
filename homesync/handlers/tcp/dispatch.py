"""Per-line command dispatch for the TCP line protocol."""

from __future__ import annotations

import logging
from typing import Literal
from collections.abc import Callable

from homesync.state import Connection, RuntimeDeps
from homesync.handlers.health import build_health_payload
from homesync.config.protocol import (
    CMD_PING,
    CMD_QUIT,
    CMD_LIST,
    REPLY_BYE,
    CMD_HEALTH,
    REPLY_PONG,
    REPLY_ERROR,
    CMD_TYPE_PREFIX,
    REPLY_ECHO_PREFIX,
    REPLY_ERROR_INVALID_JSON,
    REPLY_ERROR_INVALID_TYPE,
)

from .router import route_message
from .errors import safe_send_json, safe_send_line
from .parser import is_object_line, parse_message, parse_classification

logger = logging.getLogger(__name__)

LineOutcome = Literal["continue", "close"]
CommandFn = Callable[[RuntimeDeps, Connection], LineOutcome]


def _handle_classify(runtime_deps: RuntimeDeps, conn: Connection, rest: str) -> LineOutcome:
    try:
        device_type, device_id = parse_classification(rest)
    except ValueError:
        safe_send_line(conn, REPLY_ERROR_INVALID_TYPE)
        return "continue"

    runtime_deps.connections.classify(conn, device_type, device_id)
    logger.info("client:%s classified type=%s id=%s", conn.client_id, device_type, device_id)
    ack = f"OK TYPE {device_type}"
    if device_id is not None:
        ack += f" id={device_id}"
    safe_send_line(conn, ack)
    return "continue"


def _handle_message(runtime_deps: RuntimeDeps, conn: Connection, raw: str) -> LineOutcome:
    try:
        msg = parse_message(raw)
    except ValueError:
        safe_send_line(conn, REPLY_ERROR_INVALID_JSON)
        return "continue"
    route_message(runtime_deps, conn, msg, raw)
    return "continue"


def _handle_list(runtime_deps: RuntimeDeps, conn: Connection) -> LineOutcome:
    safe_send_json(conn, runtime_deps.connections.list_clients())
    return "continue"


def _handle_health(runtime_deps: RuntimeDeps, conn: Connection) -> LineOutcome:
    safe_send_json(conn, build_health_payload(runtime_deps))
    return "continue"


def _handle_ping(_runtime_deps: RuntimeDeps, conn: Connection) -> LineOutcome:
    safe_send_line(conn, REPLY_PONG)
    return "continue"


def _handle_quit(_runtime_deps: RuntimeDeps, conn: Connection) -> LineOutcome:
    safe_send_line(conn, REPLY_BYE)
    # Closing flushes the buffered BYE before the transport goes away.
    conn.stream.close()
    return "close"


COMMANDS: dict[str, CommandFn] = {
    CMD_LIST: _handle_list,
    CMD_HEALTH: _handle_health,
    CMD_PING: _handle_ping,
    CMD_QUIT: _handle_quit,
}


def dispatch_line(runtime_deps: RuntimeDeps, conn: Connection, line: str) -> LineOutcome:
    cmd = line.strip()
    if not cmd:
        return "continue"

    upper = cmd.upper()
    if upper.startswith(CMD_TYPE_PREFIX):
        return _handle_classify(runtime_deps, conn, cmd[len(CMD_TYPE_PREFIX) :])

    if is_object_line(cmd):
        return _handle_message(runtime_deps, conn, cmd)

    handler = COMMANDS.get(upper)
    if handler is not None:
        return handler(runtime_deps, conn)

    safe_send_line(conn, f"{REPLY_ECHO_PREFIX}{cmd}")
    return "continue"


def handle_line(runtime_deps: RuntimeDeps, conn: Connection, line: str) -> LineOutcome:
    """Dispatch one line; a failure is reported to the client and never ends the connection."""
    try:
        return dispatch_line(runtime_deps, conn, line)
    except Exception:
        logger.exception("client:%s line handler failed", conn.client_id)
        safe_send_line(conn, REPLY_ERROR)
        return "continue"


__all__ = ["COMMANDS", "LineOutcome", "dispatch_line", "handle_line"]
