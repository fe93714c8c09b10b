"""Shared errors and cross-cutting helpers for the backend."""

from restful_backend.shared.errors import UserNotFoundError, ValidationError
from restful_backend.shared.log import setup_logging

__all__ = [
    "UserNotFoundError",
    "ValidationError",
    "setup_logging",
]
