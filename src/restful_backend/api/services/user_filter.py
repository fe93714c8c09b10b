"""Projection restricting serialized users to the public ``UserInfo`` fields.

Only ``id``, ``name``, ``birthDate`` and ``joinDate`` are copied out of a
stored user. Links belong to the envelope and pass through untouched.
"""

from __future__ import annotations

from restful_backend.api.models import Link, UserInfo, UserInfoCollection, UserInfoEmbedded
from restful_backend.api.services.assembler import CollectionModel, EntityModel


def _links(links: dict[str, str]) -> dict[str, Link]:
    return {rel: Link(href=href) for rel, href in links.items()}


def filter_entity(model: EntityModel) -> UserInfo:
    """Project a wrapped user onto the whitelisted fields."""

    user = model.content
    return UserInfo(
        id=user.id,
        name=user.name,
        birth_date=user.birth_date,
        join_date=user.join_date,
        links=_links(model.links),
    )


def filter_collection(model: CollectionModel) -> UserInfoCollection:
    """Project every wrapped user of a collection."""

    return UserInfoCollection(
        embedded=UserInfoEmbedded(users=[filter_entity(item) for item in model.content]),
        links=_links(model.links),
    )


__all__ = ["filter_collection", "filter_entity"]
