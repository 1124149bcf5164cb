"""Seating bounded context — dine-in tables, cashier cards and take-away slots.

Every order is tied to a slug: a dine-in table (``M-01``), a cashier card
handed to a walk-in customer (``A-01``) or a numbered take-away slot
(``TAKEAWAY-01``).
"""

import structlog

logger = structlog.get_logger(__name__)
