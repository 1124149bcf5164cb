"""Store settings document.

Settings are one nested document with camelCase keys, the shape the admin
settings screen edits. Stored values are always read back through
``merge_stored_settings`` so missing sections fall back to the defaults.
"""

import copy

from shared.exceptions import ValidationError
from shared.money import clamp_percentage
from shared.repository import repository_for
from staff.account.management import accounts_for_settings
from store.domain import logger

DEFAULT_SERVICE_CHARGE = 5
DEFAULT_TAX_RATE = 10

DEFAULT_STORE = {
    "name": "SPM Café",
    "tagline": "Kopi lokal dengan suasana nyaman",
    "description": "Kedai kopi rumahan yang menyajikan racikan kopi spesial dan makanan ringan favorit keluarga.",
    "address": "Jl. Melati No. 12, Bandung",
    "phone": "+62 812-1234-5678",
    "email": "admin@spmcafe.com",
    "instagram": "@spmcafe",
    "wifiName": "SPM-Cafe",
    "wifiPassword": "kopihangat",
}

DEFAULT_HOURS = [
    {"day": "Senin", "open": "08:00", "close": "22:00", "closed": False},
    {"day": "Selasa", "open": "08:00", "close": "22:00", "closed": False},
    {"day": "Rabu", "open": "08:00", "close": "22:00", "closed": False},
    {"day": "Kamis", "open": "08:00", "close": "22:00", "closed": False},
    {"day": "Jumat", "open": "08:00", "close": "23:00", "closed": False},
    {"day": "Sabtu", "open": "09:00", "close": "23:00", "closed": False},
    {"day": "Minggu", "open": "09:00", "close": "21:00", "closed": False},
]

DEFAULT_PAYMENT = {
    "qrisMerchantName": "SPM Café",
    "qrisId": "00020101021234567890",
    "bankName": "BCA",
    "bankAccountName": "SPM Café",
    "bankAccountNumber": "1234567890",
    "user": {
        "qrisEnabled": True,
        "shopeePayEnabled": False,
        "goPayEnabled": False,
        "ovoEnabled": False,
        "danaEnabled": False,
    },
    "cashier": {
        "qrisEnabled": True,
        "cashEnabled": True,
        "cardEnabled": True,
    },
    "serviceCharge": DEFAULT_SERVICE_CHARGE,
    "taxRate": DEFAULT_TAX_RATE,
}

DEFAULT_NOTIFICATIONS = {
    "newOrder": True,
    "lowStock": True,
    "staffSchedule": False,
    "email": "admin@spmcafe.com",
    "whatsapp": "+62 812-1234-5678",
    "sound": True,
    "lowStockThreshold": 500,
    "staffScheduleReminderTime": 1,
    "staffScheduleGroupLink": "",
}

# Flat flags written by older versions of the settings screen, and where
# each one now lives.
_LEGACY_PAYMENT_FLAGS = {
    "cashEnabled": ("cashier",),
    "cardEnabled": ("cashier",),
    "qrisEnabled": ("cashier", "user"),
    "shopeePayEnabled": ("user",),
    "goPayEnabled": ("user",),
    "ovoEnabled": ("user",),
    "danaEnabled": ("user",),
}


def normalize_payment_settings(stored: dict | None) -> dict:
    stored = dict(stored or {})
    legacy = {flag: stored.pop(flag) for flag in list(stored) if flag in _LEGACY_PAYMENT_FLAGS}
    stored_user = stored.pop("user", None) or {}
    stored_cashier = stored.pop("cashier", None) or {}

    normalized = {
        **copy.deepcopy(DEFAULT_PAYMENT),
        **stored,
        "user": {**DEFAULT_PAYMENT["user"], **stored_user},
        "cashier": {**DEFAULT_PAYMENT["cashier"], **stored_cashier},
    }

    for flag, value in legacy.items():
        if not isinstance(value, bool):
            continue
        for audience in _LEGACY_PAYMENT_FLAGS[flag]:
            normalized[audience][flag] = value

    return normalized


def default_settings() -> dict:
    return {
        "store": dict(DEFAULT_STORE),
        "hours": [dict(entry) for entry in DEFAULT_HOURS],
        "payment": normalize_payment_settings(None),
        "notifications": dict(DEFAULT_NOTIFICATIONS),
        "adminAccounts": accounts_for_settings(),
    }


def merge_stored_settings(stored: dict | None) -> dict:
    if not stored:
        return default_settings()

    stored_hours = stored.get("hours") or []
    hours = []
    for default in DEFAULT_HOURS:
        candidate = next((h for h in stored_hours if isinstance(h, dict) and h.get("day") == default["day"]), None)
        hours.append({**default, **(candidate or {}), "day": default["day"]})

    stored_accounts = stored.get("adminAccounts") or []
    if stored_accounts:
        accounts = [{**account, "status": account.get("status") or "inactive"} for account in stored_accounts]
    else:
        accounts = accounts_for_settings()

    return {
        "store": {**DEFAULT_STORE, **(stored.get("store") or {})},
        "hours": hours,
        "payment": normalize_payment_settings(stored.get("payment")),
        "notifications": {**DEFAULT_NOTIFICATIONS, **(stored.get("notifications") or {})},
        "adminAccounts": accounts,
    }


_OBJECT_SECTIONS = ("store", "payment", "notifications")
_PAYMENT_AUDIENCES = ("user", "cashier")
SECTION_FORMAT_MESSAGE = "Harus berupa objek"


def _check_sections(partial: dict) -> None:
    """Reject partial documents whose sections have the wrong shape."""
    errors: dict[str, list[str]] = {}
    for section in _OBJECT_SECTIONS:
        if section in partial and not isinstance(partial[section], dict):
            errors[section] = [SECTION_FORMAT_MESSAGE]
    payment = partial.get("payment")
    if isinstance(payment, dict):
        for audience in _PAYMENT_AUDIENCES:
            if audience in payment and not isinstance(payment[audience], dict):
                errors[f"payment.{audience}"] = [SECTION_FORMAT_MESSAGE]
    if "hours" in partial and not isinstance(partial["hours"], list):
        errors["hours"] = ["Harus berupa daftar"]
    if errors:
        raise ValidationError(errors)


def _deep_merge(base: dict, changes: dict) -> dict:
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# ---------------------------------------------------------------------------
# Stored document
# ---------------------------------------------------------------------------
class StoreSettings:
    """Holder for the single stored settings document."""

    id = "store"

    def __init__(self, document: dict) -> None:
        self.document = document


def _stored() -> dict | None:
    record = repository_for(StoreSettings).find(StoreSettings.id)
    return record.document if record else None


def get_store_settings() -> dict:
    settings = merge_stored_settings(_stored())
    settings["adminAccounts"] = accounts_for_settings()
    return settings


def update_settings(partial: dict) -> dict:
    """Deep-merge ``partial`` into the stored settings and return the result.

    Hours are replaced per weekday. Service charge and tax rate are clamped
    to 0..100, with unreadable values becoming 0. The admin account list
    always mirrors the staff accounts.
    """
    current = merge_stored_settings(_stored())
    partial = dict(partial or {})
    _check_sections(partial)
    hours = partial.pop("hours", None)
    partial.pop("adminAccounts", None)

    merged = _deep_merge(current, partial)
    if hours is not None:
        merged["hours"] = merge_stored_settings({"hours": hours})["hours"]

    payment = normalize_payment_settings(merged.get("payment"))
    payment["serviceCharge"] = clamp_percentage(payment.get("serviceCharge"), 0)
    payment["taxRate"] = clamp_percentage(payment.get("taxRate"), 0)
    merged["payment"] = payment
    merged["adminAccounts"] = accounts_for_settings()

    repository_for(StoreSettings).add(StoreSettings(merged))
    logger.info("store_settings_updated", sections=sorted(partial) + (["hours"] if hours is not None else []))
    return merged


def charge_config() -> dict:
    """Service charge and tax rates for cart summaries."""
    payment = get_store_settings()["payment"]
    return {
        "service_charge_rate": clamp_percentage(payment.get("serviceCharge"), DEFAULT_SERVICE_CHARGE),
        "tax_rate": clamp_percentage(payment.get("taxRate"), DEFAULT_TAX_RATE),
    }
