"""TCP broker configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_REQUEST_TIMEOUT_S = "REQUEST_TIMEOUT_S"
ENV_SHUTDOWN_GRACE_S = "SHUTDOWN_GRACE_S"
ENV_READ_CHUNK_BYTES = "READ_CHUNK_BYTES"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 6222

# How long a request_state waits for an ack/state before requesters get a timeout push.
DEFAULT_REQUEST_TIMEOUT_S = 10.0

# Hard deadline for closing the listener and client streams on shutdown.
DEFAULT_SHUTDOWN_GRACE_S = 5.0

DEFAULT_READ_CHUNK_BYTES = 65536

__all__ = [
    "ENV_HOST",
    "ENV_PORT",
    "ENV_REQUEST_TIMEOUT_S",
    "ENV_SHUTDOWN_GRACE_S",
    "ENV_READ_CHUNK_BYTES",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_REQUEST_TIMEOUT_S",
    "DEFAULT_SHUTDOWN_GRACE_S",
    "DEFAULT_READ_CHUNK_BYTES",
]
