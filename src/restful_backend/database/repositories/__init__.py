"""Persistence repositories."""

from restful_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
