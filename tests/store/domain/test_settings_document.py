"""Tests for normalizing and merging the store settings document."""

from store.settings import (
    DEFAULT_HOURS,
    DEFAULT_NOTIFICATIONS,
    DEFAULT_STORE,
    default_settings,
    merge_stored_settings,
    normalize_payment_settings,
)


class TestNormalizePaymentSettings:
    def test_defaults(self):
        payment = normalize_payment_settings(None)
        assert payment["serviceCharge"] == 5
        assert payment["taxRate"] == 10
        assert payment["user"]["qrisEnabled"] is True
        assert payment["cashier"]["cashEnabled"] is True

    def test_legacy_flags_move_to_audiences(self):
        payment = normalize_payment_settings({"qrisEnabled": False, "cashEnabled": False, "goPayEnabled": True})
        assert payment["user"]["qrisEnabled"] is False
        assert payment["cashier"]["qrisEnabled"] is False
        assert payment["cashier"]["cashEnabled"] is False
        assert payment["user"]["goPayEnabled"] is True
        assert "qrisEnabled" not in payment

    def test_non_boolean_legacy_flags_ignored(self):
        payment = normalize_payment_settings({"cashEnabled": "no"})
        assert payment["cashier"]["cashEnabled"] is True

    def test_nested_values_win_over_defaults(self):
        payment = normalize_payment_settings({"bankName": "BNI", "user": {"danaEnabled": True}})
        assert payment["bankName"] == "BNI"
        assert payment["user"]["danaEnabled"] is True
        assert payment["user"]["qrisEnabled"] is True

    def test_defaults_are_not_shared(self):
        normalize_payment_settings(None)["user"]["ovoEnabled"] = True
        assert normalize_payment_settings(None)["user"]["ovoEnabled"] is False


class TestMergeStoredSettings:
    def test_empty_yields_defaults(self):
        settings = merge_stored_settings(None)
        assert settings == default_settings()
        assert settings["store"]["name"] == "SPM Café"
        assert len(settings["adminAccounts"]) == 5

    def test_sections_overlay_defaults(self):
        settings = merge_stored_settings({"store": {"name": "SPM Café Dago"}, "notifications": {"sound": False}})
        assert settings["store"] == {**DEFAULT_STORE, "name": "SPM Café Dago"}
        assert settings["notifications"] == {**DEFAULT_NOTIFICATIONS, "sound": False}

    def test_hours_follow_weekdays(self):
        settings = merge_stored_settings(
            {"hours": [{"day": "Minggu", "closed": True}, {"day": "Libur", "open": "00:00"}, "rusak"]}
        )
        assert [entry["day"] for entry in settings["hours"]] == [entry["day"] for entry in DEFAULT_HOURS]
        assert settings["hours"][6] == {"day": "Minggu", "open": "09:00", "close": "21:00", "closed": True}

    def test_stored_accounts_default_to_inactive(self):
        settings = merge_stored_settings({"adminAccounts": [{"email": "x@spmcafe.com", "status": ""}]})
        assert settings["adminAccounts"] == [{"email": "x@spmcafe.com", "status": "inactive"}]
