"""Service layer for API-specific business logic."""

from restful_backend.api.services.assembler import (
    CollectionModel,
    EntityModel,
    UserLinkAssembler,
)
from restful_backend.api.services.user_filter import (
    filter_collection,
    filter_entity,
)
from restful_backend.api.services.users import (
    NAME_REQUIRED_MESSAGE,
    UserController,
    UserStore,
)

__all__ = [
    "NAME_REQUIRED_MESSAGE",
    "CollectionModel",
    "EntityModel",
    "UserController",
    "UserLinkAssembler",
    "UserStore",
    "filter_collection",
    "filter_entity",
]
