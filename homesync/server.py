"""FastAPI host for the Homesync TCP relay broker.

The app's lifespan owns the TCP listener; the HTTP routes only expose health
and the live client snapshot for probes and dashboards.
"""

from __future__ import annotations

import logging
from typing import Any
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from homesync.state import RuntimeDeps
from homesync.runtime.logging import configure_logging
from homesync.handlers.health import build_health_payload
from homesync.runtime.dependencies import build_runtime_deps

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    runtime_deps = await build_runtime_deps()
    app.state.runtime_deps = runtime_deps
    logger.info("runtime: ready")
    try:
        yield
    finally:
        deps = getattr(app.state, "runtime_deps", None)
        if deps is not None:
            await deps.shutdown()
        logger.info("runtime: stopped")


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)


def _runtime_deps(request: Request) -> RuntimeDeps:
    runtime_deps = getattr(request.app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health(request: Request) -> dict[str, Any]:
    return build_health_payload(_runtime_deps(request))


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/clients")
async def clients(request: Request) -> list[dict[str, Any]]:
    return _runtime_deps(request).connections.list_clients()
