"""Payments bounded context — QRIS payment sessions for customer checkout.

A payment session is opened for a cart, shows a QR code with a countdown and,
once the customer confirms, places the order through the Ordering context.
The QR payload is issued by a swappable gateway (see ``payments.gateway``).
"""

import structlog

logger = structlog.get_logger(__name__)
