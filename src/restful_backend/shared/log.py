"""Logging configuration shared by the application and uvicorn."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    resolved = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "restful_backend"):
        logging.getLogger(name).setLevel(resolved)
