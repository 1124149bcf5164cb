"""Menu domain API package."""

from menu.api.routes import menu_router, product_admin_router

__all__ = ["menu_router", "product_admin_router"]
