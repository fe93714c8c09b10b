"""SQLAlchemy schemas for persisted entities."""

from restful_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
