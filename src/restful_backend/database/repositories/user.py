"""Repository helpers for working with users."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from restful_backend.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> Sequence[UserSchema]:
        """Return every stored user ordered by id."""
        stmt = select(UserSchema).order_by(UserSchema.id)
        return self._session.scalars(stmt).all()

    def find_by_id(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def save(self, user: UserSchema) -> UserSchema:
        """Insert or update a user, assigning an id to new rows."""
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> UserSchema | None:
        """Remove a user and return its last state, if it existed."""
        user = self.find_by_id(user_id)
        if user is None:
            return None
        self._session.delete(user)
        self._session.flush()
        return user

    def rename_by_id(self, user_id: int, name: str) -> UserSchema | None:
        """Change the name of an existing user."""
        user = self.find_by_id(user_id)
        if user is None:
            return None
        user.name = name
        self._session.flush()
        return user
