"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BrokerSettings:
    host: str
    port: int
    request_timeout_s: float
    shutdown_grace_s: float
    read_chunk_bytes: int


@dataclass(frozen=True, slots=True)
class HttpSettings:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    broker: BrokerSettings
    http: HttpSettings


__all__ = [
    "AppSettings",
    "BrokerSettings",
    "HttpSettings",
]
