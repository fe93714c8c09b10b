"""Request handling logic for the user resource."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from restful_backend.api.models import (
    UserCreateRequest,
    UserInfo,
    UserInfoCollection,
    UserRenameRequest,
    UserResponse,
)
from restful_backend.api.services.assembler import UserLinkAssembler
from restful_backend.api.services.user_filter import filter_collection, filter_entity
from restful_backend.database import UserSchema
from restful_backend.shared import UserNotFoundError, ValidationError

logger = logging.getLogger(__name__)

NAME_REQUIRED_MESSAGE = "name field is required"


class UserStore(Protocol):
    """Storage operations the controller relies on."""

    def list_all(self) -> Sequence[UserSchema]: ...

    def find_by_id(self, user_id: int) -> UserSchema | None: ...

    def save(self, user: UserSchema) -> UserSchema: ...

    def delete_by_id(self, user_id: int) -> UserSchema | None: ...

    def rename_by_id(self, user_id: int, name: str) -> UserSchema | None: ...


class UserController:
    """Coordinates the user store and link assembler for each operation.

    List and get responses are wrapped with links and passed through the
    ``UserInfo`` field filter. Create, delete and rename return the stored
    record as is.
    """

    def __init__(self, store: UserStore, assembler: UserLinkAssembler) -> None:
        self._store = store
        self._assembler = assembler

    def list_all_users(self) -> UserInfoCollection:
        users = self._store.list_all()
        return filter_collection(self._assembler.wrap_many(users))

    def retrieve_user_by_id(self, user_id: int) -> UserInfo:
        user = self._store.find_by_id(user_id)
        if user is None:
            logger.debug("User id=%s not found", user_id)
            raise UserNotFoundError(user_id)
        return filter_entity(self._assembler.wrap_one(user))

    def create_user(self, payload: UserCreateRequest) -> UserResponse:
        user = UserSchema(
            name=payload.name,
            birth_date=payload.birth_date,
            join_date=payload.join_date,
            password=payload.password,
            ssn=payload.ssn,
        )
        saved = self._store.save(user)
        logger.info("Created user id=%s", saved.id)
        return UserResponse.model_validate(saved)

    def delete_user(self, user_id: int) -> UserResponse:
        user = self._store.delete_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Deleted user id=%s", user_id)
        return UserResponse.model_validate(user)

    def update_user(
        self, user_id: int, payload: UserRenameRequest | None
    ) -> UserResponse:
        # empty names are forwarded; only a missing name is rejected
        if payload is None or payload.name is None:
            raise ValidationError(NAME_REQUIRED_MESSAGE)
        user = self._store.rename_by_id(user_id, payload.name)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("Renamed user id=%s", user_id)
        return UserResponse.model_validate(user)
