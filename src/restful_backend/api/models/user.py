"""Pydantic models for the user resource endpoints."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, PastDate, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(_CamelModel):
    """Payload for creating a new user. Any client supplied id is ignored."""

    name: str = Field(min_length=1, max_length=255)
    birth_date: PastDate | None = None
    join_date: date = Field(default_factory=date.today)
    password: str | None = Field(default=None, max_length=255)
    ssn: str | None = Field(default=None, max_length=32)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            msg = "name must not be empty"
            raise ValueError(msg)
        return value


class UserRenameRequest(_CamelModel):
    """Partial update payload; only ``name`` is honoured."""

    name: str | None = Field(default=None, max_length=255)


class UserResponse(_CamelModel):
    """Full representation of a stored user, internal fields included."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    name: str
    birth_date: date | None
    join_date: date
    password: str | None = None
    ssn: str | None = None


class Link(BaseModel):
    """A single hypermedia link."""

    href: str


class UserInfo(_CamelModel):
    """Whitelisted user projection used in list and get responses."""

    id: int
    name: str
    birth_date: date | None
    join_date: date
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


class UserInfoEmbedded(BaseModel):
    users: list[UserInfo] = Field(default_factory=list)


class UserInfoCollection(BaseModel):
    """Collection envelope of whitelisted users."""

    model_config = ConfigDict(populate_by_name=True)

    embedded: UserInfoEmbedded = Field(
        default_factory=UserInfoEmbedded, alias="_embedded"
    )
    links: dict[str, Link] = Field(default_factory=dict, alias="_links")


class FieldViolation(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    timestamp: str
    message: str
    details: str
    errors: list[FieldViolation] | None = None
