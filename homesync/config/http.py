"""HTTP diagnostics app configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HTTP_HOST = "HTTP_HOST"
ENV_HTTP_PORT = "HTTP_PORT"

DEFAULT_HTTP_HOST = "0.0.0.0"
DEFAULT_HTTP_PORT = 8080

__all__ = [
    "ENV_HTTP_HOST",
    "ENV_HTTP_PORT",
    "DEFAULT_HTTP_HOST",
    "DEFAULT_HTTP_PORT",
]
