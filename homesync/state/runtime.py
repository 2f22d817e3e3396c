"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from datetime import datetime, timezone
from dataclasses import field, dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from homesync.state.settings import AppSettings
    from homesync.handlers.pending import PendingRequestTable
    from homesync.handlers.connections import ConnectionRegistry


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionRegistry
    pending: PendingRequestTable
    settings: AppSettings
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    started_monotonic: float = field(default_factory=time.monotonic)
    server: asyncio.AbstractServer | None = None
    port: int = 0

    def uptime_seconds(self) -> int:
        return max(0, int(time.monotonic() - self.started_monotonic))

    async def shutdown(self) -> None:
        server = self.server
        self.server = None
        self.pending.close()
        if server is None:
            return
        server.close()
        for conn in self.connections.connections():
            with contextlib.suppress(Exception):
                conn.stream.close()
        try:
            await asyncio.wait_for(server.wait_closed(), timeout=self.settings.broker.shutdown_grace_s)
        except TimeoutError:
            logger.warning(
                "broker: shutdown grace of %.1fs elapsed with %s client(s) still open",
                self.settings.broker.shutdown_grace_s,
                self.connections.get_connection_count(),
            )
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
