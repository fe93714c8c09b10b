"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from restful_backend.api.services import UserController, UserLinkAssembler, UserStore
from restful_backend.database import UserRepository, get_session


def get_user_store(session: Session = Depends(get_session)) -> UserStore:
    """Return a session-bound :class:`UserRepository`."""

    return UserRepository(session)


def get_link_assembler(request: Request) -> UserLinkAssembler:
    """Build links relative to the base URL the client used."""

    return UserLinkAssembler(str(request.base_url))


def get_user_controller(
    store: UserStore = Depends(get_user_store),
    assembler: UserLinkAssembler = Depends(get_link_assembler),
) -> UserController:
    return UserController(store, assembler)


__all__ = ["get_link_assembler", "get_user_controller", "get_user_store"]
