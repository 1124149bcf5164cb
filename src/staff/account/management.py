"""Account services — lookup, sign-in check, profile and password changes."""

from shared.exceptions import ObjectNotFoundError, ValidationError
from shared.repository import repository_for
from staff.account.account import (
    ALL_ACCOUNTS,
    STAFF_ACCOUNTS,
    ProfileOverride,
    StaffAccount,
    StaffProfile,
    check_password,
    hash_password,
    normalize_email,
)
from staff.account.roles import is_route_allowed_for_role
from staff.domain import logger

MIN_PASSWORD_LENGTH = 6


def _base_account(email: str | None) -> StaffAccount | None:
    normalized = normalize_email(email)
    return next((a for a in ALL_ACCOUNTS if a.email.lower() == normalized), None)


def _override(email: str) -> ProfileOverride | None:
    return repository_for(ProfileOverride).find(normalize_email(email))


def find_account(email: str | None) -> StaffProfile | None:
    account = _base_account(email)
    if account is None:
        return None
    return StaffProfile.merge(account, _override(account.email))


def get_account(email: str | None) -> StaffProfile:
    profile = find_account(email)
    if profile is None:
        raise ObjectNotFoundError(f"Akun `{email}` tidak ditemukan")
    return profile


def all_accounts() -> list[StaffProfile]:
    return [StaffProfile.merge(account, _override(account.email)) for account in STAFF_ACCOUNTS]


def accounts_for_settings() -> list[dict]:
    return [profile.settings_entry() for profile in all_accounts()]


def verify_password(email: str | None, password: str | None) -> bool:
    account = _base_account(email)
    if account is None:
        return False
    return check_password(account, _override(account.email), password or "")


def _override_for_update(email: str) -> tuple[StaffAccount, ProfileOverride]:
    account = _base_account(email)
    if account is None:
        raise ObjectNotFoundError(f"Akun `{email}` tidak ditemukan")
    repo = repository_for(ProfileOverride)
    key = normalize_email(account.email)
    override = repo.find(key)
    if override is None:
        override = repo.add(ProfileOverride(email=key))
    return account, override


def update_password(email: str, password: str, current_password: str | None = None) -> StaffProfile:
    if current_password is not None and not verify_password(email, current_password):
        raise ValidationError({"currentPassword": ["Kata sandi saat ini salah."]})
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({"password": [f"Kata sandi minimal {MIN_PASSWORD_LENGTH} karakter."]})
    _, override = _override_for_update(email)
    override.password_hash = hash_password(password)
    logger.info("staff_password_updated", email=override.email)
    return get_account(email)


def _cleaned(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


def update_profile(email: str, **updates) -> StaffProfile:
    """Apply profile changes; an empty value removes that override.

    Keys left out of ``updates`` are not touched. A landing page the role may
    not open is dropped in favour of the role's default.
    """
    account, override = _override_for_update(email)

    if "display_name" in updates:
        override.display_name = _cleaned(updates["display_name"])
    if "phone" in updates:
        override.phone = _cleaned(updates["phone"])
    if "avatar_color" in updates:
        override.avatar_color = _cleaned(updates["avatar_color"])
    if "avatar_initials" in updates:
        initials = _cleaned(updates["avatar_initials"])
        override.avatar_initials = initials.upper()[:3] if initials else None
    if "bio" in updates:
        override.bio = _cleaned(updates["bio"])
    if "default_route" in updates:
        route = updates["default_route"]
        override.default_route = route if route and is_route_allowed_for_role(route, account.role) else None

    logger.info("staff_profile_updated", email=override.email, fields=sorted(updates))
    return get_account(email)
