"""Tests for the dine-in Table aggregate."""

import pydantic
import pytest
from seating.table.table import Table, format_table_code, format_table_name, table_number, table_url
from shared.exceptions import ValidationError


class TestTableCodes:
    def test_code_and_name(self):
        assert format_table_code(4) == "M-04"
        assert format_table_name(4) == "Meja 04"

    def test_number_from_slug(self):
        assert table_number("M-12") == 12
        assert table_number("VIP") is None

    def test_url_points_at_menu(self):
        assert table_url("https://spmcafe.id/", "M-01") == "https://spmcafe.id/menu?cards=M-01"


class TestTableCreation:
    def test_create(self):
        table = Table.create(slug="M-02", name="Meja 02")
        assert table.active is True
        assert table.number == 2

    def test_create_requires_slug_and_name(self):
        with pytest.raises(ValidationError) as exc:
            Table.create(slug="M-02")
        assert exc.value.messages == {"table": ["slug dan name wajib diisi"]}

    def test_only_false_deactivates(self):
        assert Table.create(slug="M-02", name="Meja 02", active=None).active is True
        assert Table.create(slug="M-02", name="Meja 02", active=False).active is False

    def test_numbered(self):
        table = Table.numbered(3, "http://localhost:3000", qr_renderer=lambda url: f"qr:{url}")
        assert table.slug == "M-03"
        assert table.name == "Meja 03"
        assert table.url == "http://localhost:3000/menu?cards=M-03"
        assert table.qr_data_url == "qr:http://localhost:3000/menu?cards=M-03"


class TestTableChanges:
    def test_merge_keeps_slug(self):
        table = Table.create(slug="M-02", name="Meja 02")
        table.merge({"slug": "M-99", "name": "Teras", "unknown": 1})
        assert table.slug == "M-02"
        assert table.name == "Teras"

    def test_invalid_merge_changes_nothing(self):
        table = Table.create(slug="M-02", name="Meja 02")
        with pytest.raises(pydantic.ValidationError):
            table.merge({"name": "Renamed", "active": "nope"})
        assert table.name == "Meja 02"
        assert table.active is True

    def test_toggle(self):
        table = Table.create(slug="M-02", name="Meja 02")
        table.toggle()
        assert table.active is False
        table.toggle()
        assert table.active is True
