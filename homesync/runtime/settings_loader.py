"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from homesync.state.settings import AppSettings, HttpSettings, BrokerSettings
from homesync.config.http import ENV_HTTP_HOST, ENV_HTTP_PORT, DEFAULT_HTTP_HOST, DEFAULT_HTTP_PORT
from homesync.config.broker import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_READ_CHUNK_BYTES,
    ENV_SHUTDOWN_GRACE_S,
    ENV_REQUEST_TIMEOUT_S,
    DEFAULT_READ_CHUNK_BYTES,
    DEFAULT_SHUTDOWN_GRACE_S,
    DEFAULT_REQUEST_TIMEOUT_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _port_env(name: str, default: int) -> int:
    port = _int_env(name, default)
    if port < 0 or port > 65535:
        return default
    return port


def _load_broker_settings() -> BrokerSettings:
    request_timeout = _float_env(ENV_REQUEST_TIMEOUT_S, DEFAULT_REQUEST_TIMEOUT_S)
    if request_timeout <= 0:
        request_timeout = DEFAULT_REQUEST_TIMEOUT_S
    shutdown_grace = _float_env(ENV_SHUTDOWN_GRACE_S, DEFAULT_SHUTDOWN_GRACE_S)
    if shutdown_grace <= 0:
        shutdown_grace = DEFAULT_SHUTDOWN_GRACE_S
    read_chunk_bytes = _int_env(ENV_READ_CHUNK_BYTES, DEFAULT_READ_CHUNK_BYTES)

    return BrokerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=_port_env(ENV_PORT, DEFAULT_PORT),
        request_timeout_s=request_timeout,
        shutdown_grace_s=shutdown_grace,
        read_chunk_bytes=max(1, read_chunk_bytes),
    )


def _load_http_settings() -> HttpSettings:
    return HttpSettings(
        host=_str_env(ENV_HTTP_HOST, DEFAULT_HTTP_HOST),
        port=_port_env(ENV_HTTP_PORT, DEFAULT_HTTP_PORT),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        broker=_load_broker_settings(),
        http=_load_http_settings(),
    )


__all__ = ["load_settings"]
