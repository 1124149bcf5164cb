"""Seating domain API package."""

from seating.api.routes import admin_table_router, cashier_router, table_access_router, table_records_router

__all__ = ["admin_table_router", "cashier_router", "table_access_router", "table_records_router"]
