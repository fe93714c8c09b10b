"""Domain errors raised by the user service layer."""

from __future__ import annotations


class UserNotFoundError(Exception):
    """Raised when no user exists for the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User id={user_id} does not exist")
        self.user_id = user_id


class ValidationError(Exception):
    """Raised when a request payload is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
