"""Per-connection state for admitted TCP clients."""

from __future__ import annotations

from typing import Any, Protocol
from dataclasses import dataclass

from homesync.config.protocol import DEVICE_TYPE_UNKNOWN


class LineStream(Protocol):
    """Write side of a client stream (satisfied by `asyncio.StreamWriter`)."""

    def write(self, data: bytes) -> None: ...

    def close(self) -> None: ...

    def is_closing(self) -> bool: ...


@dataclass(slots=True, eq=False)
class Connection:
    """One admitted client.

    `device_type` and `device_id` stay unset until the client classifies itself
    with a `TYPE:` command. Instances hash by identity so they can be collected in
    requester sets.
    """

    client_id: int
    remote: str
    stream: LineStream
    device_type: str | None = None
    device_id: str | None = None

    def snapshot(self) -> dict[str, Any]:
        return {
            "clientId": self.client_id,
            "remote": self.remote,
            "type": self.device_type or DEVICE_TYPE_UNKNOWN,
            "id": self.device_id,
        }


__all__ = ["Connection", "LineStream"]
