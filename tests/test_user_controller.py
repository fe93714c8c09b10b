"""Controller tests against an in-memory fake store."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import pytest

from restful_backend.api.models import UserCreateRequest, UserRenameRequest
from restful_backend.api.services import (
    NAME_REQUIRED_MESSAGE,
    UserController,
    UserLinkAssembler,
)
from restful_backend.database import UserSchema
from restful_backend.shared import UserNotFoundError, ValidationError


class FakeUserStore:
    """Dictionary backed stand-in for the SQLAlchemy repository."""

    def __init__(self) -> None:
        self.users: dict[int, UserSchema] = {}
        self._next_id = 1

    def list_all(self) -> Sequence[UserSchema]:
        return list(self.users.values())

    def find_by_id(self, user_id: int) -> UserSchema | None:
        return self.users.get(user_id)

    def save(self, user: UserSchema) -> UserSchema:
        if user.id is None:
            user.id = self._next_id
            self._next_id += 1
        self.users[user.id] = user
        return user

    def delete_by_id(self, user_id: int) -> UserSchema | None:
        return self.users.pop(user_id, None)

    def rename_by_id(self, user_id: int, name: str) -> UserSchema | None:
        user = self.users.get(user_id)
        if user is not None:
            user.name = name
        return user


@pytest.fixture
def store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def controller(store: FakeUserStore) -> UserController:
    return UserController(store, UserLinkAssembler("http://api.test/"))


def _payload(name: str = "Alice") -> UserCreateRequest:
    return UserCreateRequest(
        name=name,
        birth_date=date(1990, 1, 1),
        join_date=date(2020, 1, 1),
        ssn="123",
    )


def test_create_user_assigns_id(controller: UserController, store: FakeUserStore) -> None:
    created = controller.create_user(_payload())

    assert created.id == 1
    assert created.ssn == "123"
    assert store.users[1].name == "Alice"


def test_retrieve_user_is_filtered(controller: UserController) -> None:
    controller.create_user(_payload())

    info = controller.retrieve_user_by_id(1)

    dumped = info.model_dump(by_alias=True)
    assert set(dumped) == {"id", "name", "birthDate", "joinDate", "_links"}
    assert dumped["_links"]["self"]["href"] == "http://api.test/users/1"


def test_retrieve_missing_user_raises(controller: UserController) -> None:
    with pytest.raises(UserNotFoundError):
        controller.retrieve_user_by_id(3)


def test_list_all_users(controller: UserController) -> None:
    controller.create_user(_payload("Alice"))
    controller.create_user(_payload("Bob"))

    collection = controller.list_all_users()

    assert [user.name for user in collection.embedded.users] == ["Alice", "Bob"]
    assert collection.links["self"].href == "http://api.test/users"


def test_delete_missing_user_raises(controller: UserController) -> None:
    with pytest.raises(UserNotFoundError):
        controller.delete_user(1)


@pytest.mark.parametrize("payload", [None, UserRenameRequest()])
def test_update_user_requires_name(
    controller: UserController,
    store: FakeUserStore,
    payload: UserRenameRequest | None,
) -> None:
    controller.create_user(_payload())

    with pytest.raises(ValidationError) as exc_info:
        controller.update_user(1, payload)

    assert exc_info.value.message == NAME_REQUIRED_MESSAGE
    assert store.users[1].name == "Alice"


def test_update_user_renames(controller: UserController) -> None:
    controller.create_user(_payload())

    updated = controller.update_user(1, UserRenameRequest(name="Alicia"))

    assert updated.name == "Alicia"
    assert updated.birth_date == date(1990, 1, 1)


def test_update_missing_user_raises(controller: UserController) -> None:
    with pytest.raises(UserNotFoundError):
        controller.update_user(9, UserRenameRequest(name="Ghost"))
