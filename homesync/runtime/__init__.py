"""Runtime package.

Keep this module dependency-light: importing `homesync.runtime.*` in unit tests
should not start any listener.
"""

__all__: list[str] = []
