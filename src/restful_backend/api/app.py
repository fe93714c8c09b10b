"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restful_backend.api.errors import register_exception_handlers
from restful_backend.api.middleware import RequestLoggingMiddleware
from restful_backend.api.routers import users_router
from restful_backend.database import get_database
from restful_backend.settings import get_settings
from restful_backend.shared import setup_logging


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    if settings.database_auto_create:
        get_database(settings).create_schema()
    yield


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Users API", lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(users_router)
    return app
