"""Hypermedia envelopes wrapping user records with navigation links."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from restful_backend.database import UserSchema

USERS_PATH = "users"


@dataclass(slots=True)
class EntityModel:
    """A single user together with its links, keyed by relation name."""

    content: UserSchema
    links: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class CollectionModel:
    """A sequence of wrapped users plus links describing the collection."""

    content: list[EntityModel] = field(default_factory=list)
    links: dict[str, str] = field(default_factory=dict)


class UserLinkAssembler:
    """Builds absolute ``self``/``users`` links below a base URL."""

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def collection_href(self) -> str:
        return f"{self._base_url}/{USERS_PATH}"

    def user_href(self, user_id: int) -> str:
        return f"{self.collection_href}/{user_id}"

    def wrap_one(self, user: UserSchema) -> EntityModel:
        return EntityModel(
            content=user,
            links={"self": self.user_href(user.id), "users": self.collection_href},
        )

    def wrap_many(self, users: Iterable[UserSchema]) -> CollectionModel:
        return CollectionModel(
            content=[self.wrap_one(user) for user in users],
            links={"self": self.collection_href},
        )
