"""Store domain API package."""

from store.api.routes import router

__all__ = ["router"]
