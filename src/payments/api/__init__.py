"""Payments domain API package."""

from payments.api.routes import checkout_router, payment_router

__all__ = ["checkout_router", "payment_router"]
