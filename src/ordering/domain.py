"""Ordering bounded context — carts, orders and their read models.

Carts hold the lines a customer (or the cashier, on behalf of a card or a
take-away slot) has picked; placing an order freezes those lines, their
prices and the charges into an ``OrderEntry`` that the kitchen then moves
through its statuses.
"""

import structlog

logger = structlog.get_logger(__name__)
