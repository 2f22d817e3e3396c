"""Send helpers for the line protocol.

Writes go straight into the peer's transport buffer and never await; a slow
peer cannot stall the connection that triggered the write.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Iterable

import orjson

from homesync.state.connection import Connection
from homesync.config.protocol import LINE_ENCODING, LINE_DELIMITER

logger = logging.getLogger(__name__)


def encode_line(text: str) -> bytes:
    return text.encode(LINE_ENCODING) + LINE_DELIMITER


def dumps_line(data: Any) -> str:
    return orjson.dumps(data).decode(LINE_ENCODING)


def safe_send_line(conn: Connection, text: str) -> bool:
    try:
        if conn.stream.is_closing():
            return False
        conn.stream.write(encode_line(text))
    except Exception:
        logger.debug("client:%s send failed", conn.client_id, exc_info=True)
        return False
    return True


def safe_send_json(conn: Connection, data: Any) -> bool:
    return safe_send_line(conn, dumps_line(data))


def fan_out(recipients: Iterable[Connection], text: str, *, exclude: Connection | None = None) -> int:
    """Write `text` to every recipient except `exclude`; return the successful write count."""
    delivered = 0
    for conn in recipients:
        if conn is exclude:
            continue
        if safe_send_line(conn, text):
            delivered += 1
        else:
            logger.warning("client:%s %s forward skipped (write failed)", conn.client_id, conn.remote)
    return delivered


__all__ = [
    "encode_line",
    "dumps_line",
    "safe_send_line",
    "safe_send_json",
    "fan_out",
]
