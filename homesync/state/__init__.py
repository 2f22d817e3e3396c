from .runtime import RuntimeDeps
from .pending import PendingRequest
from .settings import AppSettings
from .connection import Connection

__all__ = ["AppSettings", "Connection", "PendingRequest", "RuntimeDeps"]
