"""Tests for saving store settings and the charge rates carts use."""

import pytest
from ordering.cart.cart import CartItem
from ordering.cart.management import add_item, create_cart, get_cart_view
from shared.exceptions import ValidationError
from staff.account.management import update_profile
from store.settings import charge_config, get_store_settings, update_settings


class TestUpdateSettings:
    def test_deep_merge_keeps_other_fields(self):
        update_settings({"store": {"tagline": "Kopi enak"}, "payment": {"user": {"ovoEnabled": True}}})
        settings = get_store_settings()
        assert settings["store"]["tagline"] == "Kopi enak"
        assert settings["store"]["name"] == "SPM Café"
        assert settings["payment"]["user"]["ovoEnabled"] is True
        assert settings["payment"]["user"]["qrisEnabled"] is True

    def test_hours_replaced_per_day(self):
        update_settings({"hours": [{"day": "Senin", "closed": True}]})
        hours = get_store_settings()["hours"]
        assert hours[0]["closed"] is True
        assert hours[1]["closed"] is False

    def test_rates_are_clamped(self):
        settings = update_settings({"payment": {"serviceCharge": 150, "taxRate": "abc"}})
        assert settings["payment"]["serviceCharge"] == 100
        assert settings["payment"]["taxRate"] == 0

    def test_admin_accounts_mirror_staff(self):
        update_settings({"adminAccounts": [{"email": "palsu@spmcafe.com"}]})
        update_profile("sinta@spmcafe.com", display_name="Sinta D.")
        names = [entry["name"] for entry in get_store_settings()["adminAccounts"]]
        assert "Sinta D." in names
        assert len(names) == 5

    def test_section_that_is_not_an_object_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            update_settings({"store": "oops"})
        assert exc.value.messages == {"store": ["Harus berupa objek"]}
        assert get_store_settings()["store"]["name"] == "SPM Café"

    def test_bad_payment_sections_are_rejected(self):
        with pytest.raises(ValidationError):
            update_settings({"payment": "oops"})
        with pytest.raises(ValidationError) as exc:
            update_settings({"payment": {"taxRate": 11, "cashier": ["cash"]}})
        assert exc.value.messages == {"payment.cashier": ["Harus berupa objek"]}
        assert charge_config() == {"service_charge_rate": 5, "tax_rate": 10}

    def test_carts_still_price_after_rejected_update(self):
        with pytest.raises(ValidationError):
            update_settings({"notifications": 1, "store": {"name": "Baru"}})
        cart = create_cart()
        add_item(cart.id, CartItem(product_id="pistachio-latte"))
        assert get_cart_view(cart.id).summary.total_label == "Rp 63.525"
        assert get_store_settings()["store"]["name"] == "SPM Café"


class TestChargeConfig:
    def test_defaults(self):
        assert charge_config() == {"service_charge_rate": 5, "tax_rate": 10}

    def test_cart_summary_uses_saved_rates(self):
        update_settings({"payment": {"serviceCharge": 0, "taxRate": 11}})
        cart = create_cart()
        add_item(cart.id, CartItem(product_id="pistachio-latte"))

        summary = get_cart_view(cart.id).summary
        assert summary.service_charge == 0
        assert summary.tax == 6050
        assert summary.total_label == "Rp 61.050"
