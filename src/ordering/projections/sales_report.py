"""Sales report projection — category breakdown and sales trend.

Both views are computed from the orders store on demand. Orders are bucketed
by their local calendar date. When a view has no sales at all it falls back
to demonstration figures and says so (``breakdownIsSample`` /
``trendIsSample``), as the admin dashboard does.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum

from ordering.order.order import OrderEntry


class SalesRange(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


RANGE_LABELS = {
    SalesRange.DAILY.value: "Harian",
    SalesRange.WEEKLY.value: "Mingguan",
    SalesRange.MONTHLY.value: "Bulanan",
    SalesRange.CUSTOM.value: "Custom",
}

MAX_CUSTOM_DAYS = 30
INVALID_RANGE_ERROR = "Pilih rentang tanggal valid."
RANGE_TOO_LONG_ERROR = "Rentang maksimal 30 hari."
FALLBACK_CATEGORY_LABEL = "Lainnya"

DAY_NAMES = ("Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min")
MONTH_NAMES = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")

_DAY, _WEEK, _MONTH = "day", "week", "month"


@dataclass
class SalesDatum:
    label: str
    value: float = 0
    quantity: int = 0

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value, "quantity": self.quantity}


# Demonstration figures shown while there are no sales to report.
FALLBACK_BREAKDOWN = (
    SalesDatum("Pistachio Series", 7450000, 162),
    SalesDatum("Matcha Club", 5180000, 124),
    SalesDatum("Signature Coffee", 4680000, 110),
    SalesDatum("Snack & Dessert", 3450000, 98),
    SalesDatum("Seasonal Specials", 2300000, 62),
    SalesDatum("Cold Brew Lab", 1850000, 48),
    SalesDatum("Beans Subscription", 1250000, 27),
    SalesDatum("Merchandise", 950000, 34),
)
FALLBACK_TREND = {
    _DAY: ((2150000, 42), (2485000, 46), (2675000, 51), (2540000, 47), (2985000, 56), (3150000, 63), (2860000, 58)),
    _WEEK: (
        (12540000, 268),
        (13280000, 284),
        (14120000, 297),
        (13850000, 289),
        (14680000, 304),
        (15260000, 318),
        (16120000, 335),
        (16890000, 349),
    ),
    _MONTH: ((18250000, 365), (20500000, 418), (19850000, 402), (18950000, 387), (21400000, 436), (22350000, 452)),
}


@dataclass
class SalesInsights:
    range: str
    breakdown: list[SalesDatum]
    breakdown_label: str
    breakdown_is_sample: bool
    trend: list[SalesDatum]
    trend_label: str
    trend_is_sample: bool
    start: date
    end: date
    custom_error: str | None = None
    range_options: list[dict] = field(
        default_factory=lambda: [{"key": key, "label": label} for key, label in RANGE_LABELS.items()]
    )

    def to_dict(self) -> dict:
        return {
            "range": self.range,
            "rangeOptions": self.range_options,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "breakdown": [datum.to_dict() for datum in self.breakdown],
            "breakdownLabel": self.breakdown_label,
            "breakdownIsSample": self.breakdown_is_sample,
            "trend": [datum.to_dict() for datum in self.trend],
            "trendLabel": self.trend_label,
            "trendIsSample": self.trend_is_sample,
            "customError": self.custom_error,
        }


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------
def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _start_of_month(day: date) -> date:
    return day.replace(day=1)


def _add_months(day: date, months: int) -> date:
    index = day.year * 12 + day.month - 1 + months
    return date(index // 12, index % 12 + 1, 1)


def _align(day: date, bucket: str) -> date:
    if bucket == _WEEK:
        return _start_of_week(day)
    if bucket == _MONTH:
        return _start_of_month(day)
    return day


def _advance(day: date, bucket: str, steps: int = 1) -> date:
    if bucket == _WEEK:
        return day + timedelta(days=7 * steps)
    if bucket == _MONTH:
        return _add_months(day, steps)
    return day + timedelta(days=steps)


def _parse_date(value) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def _order_date(order: OrderEntry) -> date:
    created_at = order.created_at
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone()
    return created_at.date()


# ---------------------------------------------------------------------------
# Indonesian labels
# ---------------------------------------------------------------------------
def day_label(day: date) -> str:
    return f"{DAY_NAMES[day.weekday()]}, {day.day} {MONTH_ABBREVIATIONS[day.month - 1]}"


def day_month_label(day: date) -> str:
    return f"{day.day} {MONTH_ABBREVIATIONS[day.month - 1]}"


def month_label(day: date) -> str:
    return f"{MONTH_NAMES[day.month - 1]} {day.year}"


def full_date_label(day: date) -> str:
    return f"{day.day} {MONTH_NAMES[day.month - 1]} {day.year}"


def _bucket_label(start: date, bucket: str) -> str:
    if bucket == _MONTH:
        return month_label(start)
    if bucket == _WEEK:
        return f"{day_month_label(start)} - {day_month_label(start + timedelta(days=6))}"
    return day_label(start)


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------
@dataclass
class _Window:
    start: date
    end: date
    label: str
    bucket: str
    trend_start: date
    trend_count: int
    trend_label: str
    error: str | None = None


def _custom_window(custom_start, custom_end, today: date) -> _Window:
    error = None
    start, end = _parse_date(custom_start), _parse_date(custom_end)
    if start is None or end is None:
        error = INVALID_RANGE_ERROR
        start, end = today - timedelta(days=6), today
    if start > end:
        start, end = end, start
    end = min(end, today)

    if (end - start).days + 1 > MAX_CUSTOM_DAYS:
        error = RANGE_TOO_LONG_ERROR
        end = min(start + timedelta(days=MAX_CUSTOM_DAYS - 1), today)

    start = min(start, end)
    return _Window(
        start=start,
        end=end,
        label=f"{full_date_label(start)} - {full_date_label(end)}",
        bucket=_DAY,
        trend_start=start,
        trend_count=max(1, (end - start).days + 1),
        trend_label=f"{day_month_label(start)} - {day_month_label(end)}",
        error=error,
    )


def _window(sales_range: SalesRange, custom_start, custom_end, today: date) -> _Window:
    if sales_range == SalesRange.WEEKLY:
        return _Window(
            start=today - timedelta(days=6),
            end=today,
            label="7 hari terakhir",
            bucket=_WEEK,
            trend_start=_start_of_week(today) - timedelta(weeks=7),
            trend_count=8,
            trend_label="8 minggu terakhir",
        )
    if sales_range == SalesRange.MONTHLY:
        month_start = _start_of_month(today)
        return _Window(
            start=month_start,
            end=today,
            label=f"Bulan {month_label(today)}",
            bucket=_MONTH,
            trend_start=_add_months(month_start, -5),
            trend_count=6,
            trend_label="6 bulan terakhir",
        )
    if sales_range == SalesRange.CUSTOM:
        return _custom_window(custom_start, custom_end, today)
    return _Window(
        start=today,
        end=today,
        label=f"Hari ini ({day_label(today)})",
        bucket=_DAY,
        trend_start=today - timedelta(days=6),
        trend_count=7,
        trend_label="7 hari terakhir",
    )


def category_breakdown(orders, start: date, end: date) -> list[SalesDatum]:
    """Sales per item category between ``start`` and ``end`` (inclusive), largest first."""
    buckets: dict[str, SalesDatum] = {}
    for order in orders:
        if not start <= _order_date(order) <= end:
            continue
        for item in order.items:
            label = (item.category or "").strip() or item.name or FALLBACK_CATEGORY_LABEL
            datum = buckets.setdefault(label, SalesDatum(label))
            value = (item.unit_price or 0) * (item.quantity or 0)
            datum.value += max(value, 0)
            datum.quantity += item.quantity or 0
    return sorted(buckets.values(), key=lambda datum: datum.value, reverse=True)


def sales_trend(orders, bucket: str, first: date, count: int) -> list[SalesDatum]:
    """Order totals and item counts per bucket, ``count`` buckets from ``first``."""
    first = _align(first, bucket)
    last = _advance(first, bucket, count - 1)
    totals: dict[date, SalesDatum] = {}
    for order in orders:
        key = _align(_order_date(order), bucket)
        if not first <= key <= last:
            continue
        datum = totals.setdefault(key, SalesDatum(""))
        datum.value += order.total or 0
        datum.quantity += sum(item.quantity or 0 for item in order.items)

    trend = []
    cursor = first
    for _ in range(count):
        datum = totals.get(cursor)
        trend.append(
            SalesDatum(_bucket_label(cursor, bucket), datum.value if datum else 0, datum.quantity if datum else 0)
        )
        cursor = _advance(cursor, bucket)
    return trend


def _sample_trend(bucket: str, first: date, count: int) -> list[SalesDatum]:
    samples = FALLBACK_TREND[bucket]
    trend = []
    cursor = _align(first, bucket)
    for index in range(count):
        value, quantity = samples[min(index, len(samples) - 1)]
        trend.append(SalesDatum(_bucket_label(cursor, bucket), value, quantity))
        cursor = _advance(cursor, bucket)
    return trend


def _has_sales(data: list[SalesDatum]) -> bool:
    return any(datum.value > 0 or datum.quantity > 0 for datum in data)


def sales_insights(
    orders,
    range: str = SalesRange.DAILY.value,
    custom_start=None,
    custom_end=None,
    today: date | None = None,
) -> SalesInsights:
    try:
        sales_range = SalesRange(range)
    except ValueError:
        sales_range = SalesRange.DAILY
    today = today or date.today()
    orders = list(orders)
    window = _window(sales_range, custom_start, custom_end, today)

    breakdown = category_breakdown(orders, window.start, window.end)
    breakdown_is_sample = not _has_sales(breakdown)
    if breakdown_is_sample:
        breakdown = [SalesDatum(d.label, d.value, d.quantity) for d in FALLBACK_BREAKDOWN]

    trend = sales_trend(orders, window.bucket, window.trend_start, window.trend_count)
    trend_is_sample = not _has_sales(trend)
    if trend_is_sample:
        trend = _sample_trend(window.bucket, window.trend_start, window.trend_count)

    return SalesInsights(
        range=sales_range.value,
        breakdown=breakdown,
        breakdown_label=window.label,
        breakdown_is_sample=breakdown_is_sample,
        trend=trend,
        trend_label=window.trend_label,
        trend_is_sample=trend_is_sample,
        start=window.start,
        end=window.end,
        custom_error=window.error,
    )
