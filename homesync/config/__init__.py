"""Configuration module exports (env names and defaults only)."""

from .broker import DEFAULT_PORT, DEFAULT_REQUEST_TIMEOUT_S

__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_REQUEST_TIMEOUT_S",
]
