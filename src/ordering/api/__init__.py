"""Ordering domain API package."""

from ordering.api.routes import (
    admin_order_router,
    cart_router,
    order_records_router,
    order_router,
    sales_report_router,
)

__all__ = ["admin_order_router", "cart_router", "order_records_router", "order_router", "sales_report_router"]
