"""Pending request entries (dataclasses only)."""

from __future__ import annotations

from typing import Protocol
from dataclasses import field, dataclass

from .connection import Connection


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


@dataclass(slots=True, eq=False)
class PendingRequest:
    target_id: str
    requesters: set[Connection] = field(default_factory=set)
    timer: TimerHandle | None = None


__all__ = ["PendingRequest", "TimerHandle"]
