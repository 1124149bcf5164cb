"""Staff domain API package."""

from staff.api.routes import router

__all__ = ["router"]
