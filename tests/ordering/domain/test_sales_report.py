"""Tests for the sales report projection."""

import time
from datetime import UTC, date, datetime

import pytest
from ordering.order.order import OrderEntry, OrderItem
from ordering.projections.sales_report import (
    INVALID_RANGE_ERROR,
    RANGE_TOO_LONG_ERROR,
    category_breakdown,
    day_label,
    month_label,
    sales_insights,
)

TODAY = date(2024, 4, 10)  # a Wednesday


def _order(order_id, day, items, total):
    return OrderEntry(
        id=order_id,
        created_at=datetime(day.year, day.month, day.day, 12, 0, tzinfo=UTC),
        total=total,
        items=items,
    )


def _item(name, category, unit_price, quantity):
    return OrderItem(name=name, category=category, unit_price=unit_price, quantity=quantity)


ORDERS = [
    _order(
        "ORD-1",
        TODAY,
        [_item("Pistachio Latte", "Pistachio Series", 55000, 2), _item("Matcha Cake", "Matcha Club", 45000, 1)],
        total=155000,
    ),
    _order("ORD-2", date(2024, 4, 9), [_item("Kenya AA", "", 135000, 1)], total=135000),
    _order("ORD-3", date(2024, 3, 20), [_item("Iced Matcha", "Matcha Club", 52500, 2)], total=105000),
]


@pytest.fixture(autouse=True)
def _local_utc(monkeypatch):
    monkeypatch.setenv("TZ", "UTC")
    if hasattr(time, "tzset"):
        time.tzset()


class TestLabels:
    def test_day_label(self):
        assert day_label(date(2024, 4, 8)) == "Sen, 8 Apr"

    def test_month_label(self):
        assert month_label(date(2023, 12, 1)) == "Desember 2023"


class TestCategoryBreakdown:
    def test_groups_by_category_with_name_fallback(self):
        breakdown = category_breakdown(ORDERS, date(2024, 4, 9), TODAY)
        assert [(d.label, d.value, d.quantity) for d in breakdown] == [
            ("Kenya AA", 135000, 1),
            ("Pistachio Series", 110000, 2),
            ("Matcha Club", 45000, 1),
        ]


class TestDailyRange:
    def test_breakdown_covers_today(self):
        insights = sales_insights(ORDERS, "daily", today=TODAY)
        assert [d.label for d in insights.breakdown] == ["Pistachio Series", "Matcha Club"]
        assert insights.breakdown_label == "Hari ini (Rab, 10 Apr)"
        assert insights.breakdown_is_sample is False

    def test_trend_has_seven_daily_buckets(self):
        insights = sales_insights(ORDERS, "daily", today=TODAY)
        assert len(insights.trend) == 7
        assert insights.trend[0].label == "Kam, 4 Apr"
        assert insights.trend[-1].label == "Rab, 10 Apr"
        assert (insights.trend[-1].value, insights.trend[-1].quantity) == (155000, 3)
        assert (insights.trend[-2].value, insights.trend[-2].quantity) == (135000, 1)
        assert insights.trend_label == "7 hari terakhir"


class TestWeeklyRange:
    def test_eight_monday_aligned_weeks(self):
        insights = sales_insights(ORDERS, "weekly", today=TODAY)
        assert len(insights.trend) == 8
        assert insights.trend[-1].label == "8 Apr - 14 Apr"
        assert insights.trend[-1].value == 290000
        assert insights.trend[-4].label == "18 Mar - 24 Mar"
        assert insights.trend[-4].value == 105000
        assert insights.breakdown_label == "7 hari terakhir"


class TestMonthlyRange:
    def test_six_months(self):
        insights = sales_insights(ORDERS, "monthly", today=TODAY)
        assert [d.label for d in insights.trend] == [
            "November 2023",
            "Desember 2023",
            "Januari 2024",
            "Februari 2024",
            "Maret 2024",
            "April 2024",
        ]
        assert insights.trend[-2].value == 105000
        assert insights.breakdown_label == "Bulan April 2024"
        assert insights.start == date(2024, 4, 1)


class TestCustomRange:
    def test_inclusive_range(self):
        insights = sales_insights(ORDERS, "custom", "2024-03-20", "2024-03-21", today=TODAY)
        assert insights.custom_error is None
        assert len(insights.trend) == 2
        assert insights.breakdown[0].label == "Matcha Club"
        assert insights.breakdown_label == "20 Maret 2024 - 21 Maret 2024"

    def test_reversed_range_is_swapped(self):
        insights = sales_insights(ORDERS, "custom", "2024-04-10", "2024-04-09", today=TODAY)
        assert (insights.start, insights.end) == (date(2024, 4, 9), TODAY)

    def test_end_is_clipped_to_today(self):
        insights = sales_insights(ORDERS, "custom", "2024-04-08", "2024-05-01", today=TODAY)
        assert insights.end == TODAY
        assert insights.custom_error is None

    def test_range_longer_than_thirty_days(self):
        insights = sales_insights(ORDERS, "custom", "2024-01-01", "2024-03-31", today=TODAY)
        assert insights.custom_error == RANGE_TOO_LONG_ERROR
        assert insights.end == date(2024, 1, 30)
        assert len(insights.trend) == 30

    def test_invalid_input_falls_back_to_last_week(self):
        insights = sales_insights(ORDERS, "custom", "kemarin", None, today=TODAY)
        assert insights.custom_error == INVALID_RANGE_ERROR
        assert (insights.start, insights.end) == (date(2024, 4, 4), TODAY)


class TestSampleFallback:
    def test_no_sales_uses_sample_figures(self):
        insights = sales_insights([], "daily", today=TODAY)
        assert insights.breakdown_is_sample is True
        assert insights.breakdown[0].label == "Pistachio Series"
        assert insights.trend_is_sample is True
        assert insights.trend[0].value == 2150000
        assert insights.trend[0].label == "Kam, 4 Apr"

    def test_to_dict(self):
        data = sales_insights(ORDERS, "daily", today=TODAY).to_dict()
        assert data["range"] == "daily"
        assert data["customError"] is None
        assert [option["key"] for option in data["rangeOptions"]] == ["daily", "weekly", "monthly", "custom"]
