"""Runtime dependency construction (registry, pending table, TCP listener)."""

from __future__ import annotations

from homesync.state import RuntimeDeps
from homesync.state.settings import AppSettings
from homesync.handlers.pending import PendingRequestTable
from homesync.handlers.connections import ConnectionRegistry

from .tcp import start_tcp_server
from .settings_loader import load_settings


def build_runtime_state(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    return RuntimeDeps(
        connections=ConnectionRegistry(),
        pending=PendingRequestTable(timeout_s=settings.broker.request_timeout_s),
        settings=settings,
    )


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    runtime_deps = build_runtime_state(settings)
    await start_tcp_server(runtime_deps)
    return runtime_deps


__all__ = ["RuntimeDeps", "build_runtime_deps", "build_runtime_state"]
