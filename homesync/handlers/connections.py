"""Connection admission and classification bookkeeping."""

from __future__ import annotations

import itertools
from typing import Any

from homesync.config.protocol import BANNER
from homesync.state.connection import Connection, LineStream
from homesync.handlers.tcp.errors import safe_send_line


class ConnectionRegistry:
    """Live set of admitted connections, keyed by process-unique client id.

    Only the event loop thread touches the registry, so no lock is held.
    """

    def __init__(self, *, banner: str = BANNER) -> None:
        self._banner = banner
        self._ids = itertools.count(1)
        self._live: dict[int, Connection] = {}

    def admit(self, stream: LineStream, remote: str) -> Connection:
        conn = Connection(client_id=next(self._ids), remote=remote, stream=stream)
        self._live[conn.client_id] = conn
        safe_send_line(conn, self._banner)
        return conn

    def classify(self, conn: Connection, device_type: str, device_id: str | None = None) -> None:
        conn.device_type = device_type
        conn.device_id = device_id

    def evict(self, conn: Connection) -> bool:
        """Drop `conn` from the live set. Returns False if it was already gone."""
        if self._live.get(conn.client_id) is not conn:
            return False
        del self._live[conn.client_id]
        return True

    def list_clients(self) -> list[dict[str, Any]]:
        return [conn.snapshot() for conn in self._live.values()]

    def connections(self, device_type: str | None = None) -> list[Connection]:
        if device_type is None:
            return list(self._live.values())
        return [conn for conn in self._live.values() if conn.device_type == device_type]

    def get(self, client_id: int) -> Connection | None:
        return self._live.get(client_id)

    def get_connection_count(self) -> int:
        return len(self._live)


__all__ = ["ConnectionRegistry"]
