"""FastAPI dependencies yielding one transactional session per users request."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from restful_backend.database.service import DatabaseService
from restful_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def build_database_service(database_url: str) -> DatabaseService:
    """Create one :class:`DatabaseService` per connection string, shared by all requests."""
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the cached database service instance."""
    return build_database_service(settings.database_url)


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Yield the session backing the user store; committed when the request succeeds."""
    with db.session() as session:
        yield session
