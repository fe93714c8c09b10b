"""Uvicorn entrypoint serving the users REST API (`run-dev` / `run-prod`)."""

from __future__ import annotations

import uvicorn

from restful_backend.api import create_api
from restful_backend.settings import get_settings

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Serve the users API with the configured bind address and log level."""
    config = get_settings()
    uvicorn.run(
        "restful_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
