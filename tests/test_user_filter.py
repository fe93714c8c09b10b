from __future__ import annotations

from datetime import date

from restful_backend.api.models import UserInfo, UserInfoCollection
from restful_backend.api.services import (
    UserLinkAssembler,
    filter_collection,
    filter_entity,
)
from restful_backend.database import UserSchema


def _user(user_id: int, name: str) -> UserSchema:
    return UserSchema(
        id=user_id,
        name=name,
        birth_date=date(1985, 5, 17),
        join_date=date(2021, 3, 2),
        password="hunter2",
        ssn="000-00-0000",
    )


def test_assembler_builds_absolute_links() -> None:
    assembler = UserLinkAssembler("https://example.org/api/")

    entity = assembler.wrap_one(_user(4, "Eve"))

    assert entity.links == {
        "self": "https://example.org/api/users/4",
        "users": "https://example.org/api/users",
    }


def test_filter_drops_internal_fields_from_entity() -> None:
    entity = UserLinkAssembler("http://host").wrap_one(_user(1, "Adam"))

    filtered = filter_entity(entity)

    assert isinstance(filtered, UserInfo)
    dumped = filtered.model_dump(by_alias=True, mode="json")
    assert dumped == {
        "id": 1,
        "name": "Adam",
        "birthDate": "1985-05-17",
        "joinDate": "2021-03-02",
        "_links": {
            "self": {"href": "http://host/users/1"},
            "users": {"href": "http://host/users"},
        },
    }


def test_filter_applies_to_every_collection_item() -> None:
    collection = UserLinkAssembler("http://host").wrap_many(
        [_user(1, "Adam"), _user(2, "Eve")]
    )

    filtered = filter_collection(collection)

    assert isinstance(filtered, UserInfoCollection)
    dumped = filtered.model_dump(by_alias=True, mode="json")
    assert dumped["_links"] == {"self": {"href": "http://host/users"}}
    for item in dumped["_embedded"]["users"]:
        assert "password" not in item
        assert "ssn" not in item
        assert set(item) == {"id", "name", "birthDate", "joinDate", "_links"}


def test_filter_on_empty_collection() -> None:
    filtered = filter_collection(UserLinkAssembler("http://host").wrap_many([]))

    assert filtered.model_dump(by_alias=True)["_embedded"] == {"users": []}
