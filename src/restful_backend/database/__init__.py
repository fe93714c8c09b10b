"""Database connectivity helpers and persistence objects."""

from restful_backend.database.base import BaseSchema
from restful_backend.database.dependencies import (
    build_database_service,
    get_database,
    get_session,
)
from restful_backend.database.repositories import UserRepository
from restful_backend.database.schemas import UserSchema
from restful_backend.database.service import DatabaseService
from restful_backend.settings import BackendSettings, get_settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "build_database_service",
    "get_database",
    "get_session",
    "get_settings",
]
