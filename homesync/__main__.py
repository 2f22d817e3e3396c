"""Run the broker and its diagnostics app under uvicorn."""

from __future__ import annotations

import uvicorn

from homesync.runtime.settings_loader import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "homesync.server:app",
        host=settings.http.host,
        port=settings.http.port,
        timeout_graceful_shutdown=int(settings.broker.shutdown_grace_s) or None,
    )


if __name__ == "__main__":
    main()
