"""Database session management utilities."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager, nullcontext
from typing import Any, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from restful_backend.database.base import BaseSchema
from restful_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict[str, Any]:
    """Return engine keyword arguments suited to the target backend."""

    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # every session must see the same in-memory database
        options["poolclass"] = StaticPool
    return options


class DatabaseService:
    """Wraps SQLAlchemy engine and session factory."""

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        database_url = url or config.database_url
        self._engine = create_engine(database_url, future=True, **_engine_options(database_url))
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )
        # sessions on a static pool share one connection and must not overlap
        self._lock = (
            threading.Lock() if isinstance(self._engine.pool, StaticPool) else None
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def create_schema(self) -> None:
        """Create all tables known to :class:`BaseSchema` if missing."""

        logger.info("Ensuring database schema on %s", self._engine.url.render_as_string())
        BaseSchema.metadata.create_all(self._engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional session scope.

        On a single shared connection the whole scope is serialized.
        """

        with self._lock or nullcontext():
            session = self._session_factory()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()
