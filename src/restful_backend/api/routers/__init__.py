"""Route definitions for public HTTP endpoints."""

from restful_backend.api.routers.users import router as users_router

__all__ = ["users_router"]
