"""Models used for API request and response payloads."""

from restful_backend.api.models.user import (
    ErrorResponse,
    FieldViolation,
    Link,
    UserCreateRequest,
    UserInfo,
    UserInfoCollection,
    UserInfoEmbedded,
    UserRenameRequest,
    UserResponse,
)

__all__ = [
    "ErrorResponse",
    "FieldViolation",
    "Link",
    "UserCreateRequest",
    "UserInfo",
    "UserInfoCollection",
    "UserInfoEmbedded",
    "UserRenameRequest",
    "UserResponse",
]
