"""Health payload shared by the HEALTH line command and the HTTP app."""

from __future__ import annotations

from typing import Any

from homesync.state import RuntimeDeps
from homesync.config.protocol import HEALTH_STATUS_OK


def format_started_at(runtime_deps: RuntimeDeps) -> str:
    # Millisecond precision with a Z suffix, e.g. 2026-10-19T08:15:02.118Z
    return runtime_deps.started_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_health_payload(runtime_deps: RuntimeDeps) -> dict[str, Any]:
    return {
        "status": HEALTH_STATUS_OK,
        "uptimeSeconds": runtime_deps.uptime_seconds(),
        "startedAt": format_started_at(runtime_deps),
        "port": runtime_deps.port or runtime_deps.settings.broker.port,
    }


__all__ = ["build_health_payload", "format_started_at"]
