"""Table, card and take-away slug helpers."""

import math
import re

TAKEAWAY_PREFIX = "TAKEAWAY"
CASHIER_CARD_PREFIX = "A-"

_TAKEAWAY_PATTERN = re.compile(r"^TAKEAWAY-(\d{2,})$")


def _pad(index: int) -> str:
    return str(index).zfill(2)


def format_takeaway_slug(index) -> str:
    try:
        numeric = float(index)
    except (TypeError, ValueError):
        numeric = 1
    safe_index = max(1, math.floor(numeric) if math.isfinite(numeric) else 1)
    return f"{TAKEAWAY_PREFIX}-{_pad(safe_index)}"


def parse_takeaway_index(value: str | None) -> int | None:
    if not value or not value.strip():
        return None
    upper = value.strip().upper()
    if upper == TAKEAWAY_PREFIX:
        return 1
    match = _TAKEAWAY_PATTERN.match(upper)
    if match is None:
        return None
    return int(match.group(1))


def normalize_table_slug(value: str | None) -> str | None:
    if not value or not value.strip():
        return None
    upper = value.strip().upper()
    index = parse_takeaway_index(upper)
    if index is not None:
        return format_takeaway_slug(index)
    return upper


def is_takeaway_slug(value: str | None) -> bool:
    return parse_takeaway_index(value) is not None


def is_cashier_card_slug(value: str | None) -> bool:
    normalized = normalize_table_slug(value)
    return bool(normalized) and normalized.startswith(CASHIER_CARD_PREFIX)


def format_takeaway_label(value: str | None) -> str:
    index = parse_takeaway_index(value)
    if index is not None:
        return f"Take Away {_pad(index)}"
    return "Take Away"


def format_table_label(value: str | None) -> str:
    normalized = normalize_table_slug(value)
    if not normalized:
        return "Take Away"
    index = parse_takeaway_index(normalized)
    if index is not None:
        return f"Take Away {_pad(index)}"
    return normalized
