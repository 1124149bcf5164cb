"""Rupiah amounts and percentage rates."""

import math
from decimal import ROUND_HALF_UP, Decimal

CURRENCY = "IDR"


def round_rupiah(value) -> int:
    """Round to whole rupiah, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(value) -> str:
    """Format an amount the way the café prints it: ``Rp 55.000``."""
    amount = round_rupiah(value)
    grouped = f"{abs(amount):,}".replace(",", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {grouped}"


def format_price_delta(value) -> str:
    """Signed add-on price, e.g. ``+Rp 8.000`` or ``-Rp 3.000``."""
    label = format_currency(value)
    return label if value < 0 else f"+{label}"


def clamp_percentage(value, fallback: float) -> float:
    """Clamp a rate to [0, 100]; anything non-numeric yields ``fallback``."""
    if value is None or isinstance(value, bool):
        return fallback
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(numeric):
        return fallback
    return min(100.0, max(0.0, numeric))
