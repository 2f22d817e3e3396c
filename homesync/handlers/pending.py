"""Request/response correlation for `request_state` queries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from homesync.state.connection import Connection
from homesync.state.pending import TimerHandle, PendingRequest
from homesync.config.protocol import MSG_KEY_ID, MSG_KEY_TYPE, TIMEOUT_ERROR
from homesync.handlers.tcp.errors import safe_send_line, safe_send_json

logger = logging.getLogger(__name__)

ScheduleFn = Callable[[float, Callable[[], None]], TimerHandle]


def _call_later(delay: float, callback: Callable[[], None]) -> TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


class PendingRequestTable:
    """Map of correlation id -> connections waiting for a device answer.

    Every registration for an id restarts that id's timer, so a burst of queries
    for the same target shares one window. When the timer fires each waiter gets
    a timeout push and the entry is dropped in the same callback.
    """

    def __init__(self, *, timeout_s: float, schedule_fn: ScheduleFn | None = None) -> None:
        self.timeout_s = float(timeout_s)
        self._schedule = schedule_fn or _call_later
        self._entries: dict[str, PendingRequest] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._entries

    def get(self, target_id: str) -> PendingRequest | None:
        return self._entries.get(target_id)

    def register(self, target_id: str, requester: Connection, timeout_s: float | None = None) -> PendingRequest:
        entry = self._entries.get(target_id)
        if entry is None:
            entry = PendingRequest(target_id=target_id)
            self._entries[target_id] = entry
        entry.requesters.add(requester)

        if entry.timer is not None:
            entry.timer.cancel()
        delay = self.timeout_s if timeout_s is None else float(timeout_s)
        entry.timer = self._schedule(delay, lambda: self._expire(target_id, entry))
        return entry

    def resolve(self, target_id: str, text: str) -> int | None:
        """Deliver `text` to every waiter on `target_id`.

        Returns None when nobody is waiting. The entry stays in place so several
        responders may answer within one window.
        """
        entry = self._entries.get(target_id)
        if entry is None:
            return None
        delivered = 0
        for conn in list(entry.requesters):
            if safe_send_line(conn, text):
                delivered += 1
        return delivered

    def purge_connection(self, conn: Connection) -> int:
        """Remove `conn` from every entry; returns how many entries were dropped as a result."""
        dropped = 0
        for target_id, entry in list(self._entries.items()):
            if conn not in entry.requesters:
                continue
            entry.requesters.discard(conn)
            if not entry.requesters:
                self._drop(target_id, entry)
                dropped += 1
        return dropped

    def close(self) -> None:
        for target_id, entry in list(self._entries.items()):
            self._drop(target_id, entry)

    def _drop(self, target_id: str, entry: PendingRequest) -> None:
        if entry.timer is not None:
            entry.timer.cancel()
            entry.timer = None
        if self._entries.get(target_id) is entry:
            del self._entries[target_id]

    def _expire(self, target_id: str, entry: PendingRequest) -> None:
        # A stale callback for an entry that was already dropped or replaced is a no-op.
        if self._entries.get(target_id) is not entry:
            return
        entry.timer = None
        notice = {MSG_KEY_TYPE: "error", MSG_KEY_ID: target_id, "error": TIMEOUT_ERROR}
        for conn in list(entry.requesters):
            safe_send_json(conn, notice)
        del self._entries[target_id]
        logger.info("request_state id=%s timed out for %s requester(s)", target_id, len(entry.requesters))


__all__ = ["PendingRequestTable", "ScheduleFn"]
