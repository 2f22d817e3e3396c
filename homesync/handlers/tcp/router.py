"""Routing policy for structured (JSON object) messages."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

from homesync.state import Connection, RuntimeDeps
from homesync.config.protocol import (
    MSG_ACK,
    MSG_PING,
    MSG_STATE,
    REPLY_ACK,
    MSG_KEY_ID,
    MSG_TOGGLE,
    REPLY_PONG,
    MSG_KEY_TYPE,
    DEVICE_TYPE_ESP32,
    MSG_REQUEST_STATE,
    DEVICE_TYPE_MOBILE,
    REPLY_ERROR_MISSING_ID,
)

from .parser import correlation_key
from .errors import fan_out, safe_send_line

logger = logging.getLogger(__name__)

RouteFn = Callable[[RuntimeDeps, Connection, dict[str, Any], str], None]


def _route_ping(
    _runtime_deps: RuntimeDeps,
    conn: Connection,
    _msg: dict[str, Any],
    _raw: str,
) -> None:
    safe_send_line(conn, REPLY_PONG)


def _route_toggle(
    runtime_deps: RuntimeDeps,
    conn: Connection,
    _msg: dict[str, Any],
    raw: str,
) -> None:
    targets = runtime_deps.connections.connections(DEVICE_TYPE_ESP32)
    forwarded = fan_out(targets, raw, exclude=conn)
    logger.info("client:%s toggle forwarded=%s", conn.client_id, forwarded)
    safe_send_line(conn, f"{REPLY_ACK} forwarded={forwarded}")


def _route_request_state(
    runtime_deps: RuntimeDeps,
    conn: Connection,
    msg: dict[str, Any],
    raw: str,
) -> None:
    target_id = correlation_key(msg.get(MSG_KEY_ID))
    if target_id is None:
        safe_send_line(conn, REPLY_ERROR_MISSING_ID)
        return

    runtime_deps.pending.register(target_id, conn)
    forwarded = fan_out(runtime_deps.connections.connections(DEVICE_TYPE_ESP32), raw)
    logger.info("client:%s request_state id=%s forwarded=%s", conn.client_id, target_id, forwarded)
    safe_send_line(conn, f"{REPLY_ACK} {MSG_REQUEST_STATE} forwarded={forwarded}")


def _route_device_report(
    runtime_deps: RuntimeDeps,
    conn: Connection,
    msg: dict[str, Any],
    raw: str,
) -> None:
    target_id = correlation_key(msg.get(MSG_KEY_ID))
    if target_id is None:
        safe_send_line(conn, REPLY_ACK)
        return

    delivered = runtime_deps.pending.resolve(target_id, raw)
    if delivered is None:
        # Nobody is waiting: treat it as a passive status push for the mobile apps.
        delivered = fan_out(runtime_deps.connections.connections(DEVICE_TYPE_MOBILE), raw)
        logger.debug(
            "client:%s %s id=%s no requesters; mobile broadcast=%s",
            conn.client_id,
            msg.get(MSG_KEY_TYPE),
            target_id,
            delivered,
        )
    else:
        logger.debug(
            "client:%s %s id=%s delivered=%s", conn.client_id, msg.get(MSG_KEY_TYPE), target_id, delivered
        )
    safe_send_line(conn, REPLY_ACK)


ROUTES: dict[str, RouteFn] = {
    MSG_PING: _route_ping,
    MSG_TOGGLE: _route_toggle,
    MSG_REQUEST_STATE: _route_request_state,
    MSG_ACK: _route_device_report,
    MSG_STATE: _route_device_report,
}


def route_message(runtime_deps: RuntimeDeps, conn: Connection, msg: dict[str, Any], raw: str) -> None:
    msg_type = msg.get(MSG_KEY_TYPE)
    route = ROUTES.get(msg_type) if isinstance(msg_type, str) else None
    if route is None:
        safe_send_line(conn, REPLY_ACK)
        return
    route(runtime_deps, conn, msg, raw)


__all__ = ["ROUTES", "route_message"]
