"""Staff accounts and per-person profile overrides."""

from typing import ClassVar, Literal

from pydantic import Field
from werkzeug.security import check_password_hash, generate_password_hash

from shared.model import DomainModel
from staff.account.roles import ROLE_COLORS, default_route_for, is_route_allowed_for_role

DEFAULT_PASSWORD = "spmlogin1"


def hash_password(password: str) -> str:
    """Salted hash in werkzeug's ``method$salt$hash`` format."""
    return generate_password_hash(password)


def initials_for(name: str | None, fallback: str = "AD") -> str:
    parts = (name or "").split()[:2]
    return "".join(part[0].upper() for part in parts) or fallback


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class StaffAccount(DomainModel):
    """A built-in staff account as shipped; overrides are applied on top."""

    name: str
    email: str
    phone: str = ""
    role: str
    status: Literal["active", "inactive", "pending"] = "active"
    last_login: str = ""
    password_hash: str = Field(default_factory=lambda: hash_password(DEFAULT_PASSWORD))
    default_route: str | None = None
    avatar_color: str | None = None
    avatar_initials: str | None = None
    bio: str = ""


class ProfileOverride(DomainModel):
    identity_field: ClassVar[str] = "email"

    email: str
    display_name: str | None = None
    phone: str | None = None
    avatar_color: str | None = None
    avatar_initials: str | None = None
    bio: str | None = None
    password_hash: str | None = None
    default_route: str | None = None


class StaffProfile(DomainModel):
    """An account with its overrides applied; what the rest of the app sees."""

    name: str
    email: str
    phone: str
    role: str
    status: str
    last_login: str
    default_route: str
    avatar_color: str
    avatar_initials: str
    bio: str

    @classmethod
    def merge(cls, account: StaffAccount, override: ProfileOverride | None) -> "StaffProfile":
        override = override or ProfileOverride(email=normalize_email(account.email))
        name = (override.display_name or "").strip() or account.name
        route = override.default_route or account.default_route or default_route_for(account.role)
        if not is_route_allowed_for_role(route, account.role):
            route = default_route_for(account.role)
        return cls(
            name=name,
            email=account.email,
            phone=(override.phone or "").strip() or account.phone,
            role=account.role,
            status=account.status,
            last_login=account.last_login,
            default_route=route,
            avatar_color=override.avatar_color or account.avatar_color or ROLE_COLORS.get(account.role, "#34d399"),
            avatar_initials=(override.avatar_initials or "").strip() or account.avatar_initials or initials_for(name),
            bio=override.bio if override.bio is not None else account.bio,
        )

    def settings_entry(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role,
            "status": self.status,
            "lastLogin": self.last_login,
        }


def check_password(account: StaffAccount, override: ProfileOverride | None, password: str) -> bool:
    expected = (override.password_hash if override else None) or account.password_hash
    return check_password_hash(expected, password or "")


def _account(name, email, phone, role, last_login, password=DEFAULT_PASSWORD) -> StaffAccount:
    return StaffAccount(
        name=name,
        email=email,
        phone=phone,
        role=role,
        last_login=last_login,
        password_hash=hash_password(password),
        default_route=default_route_for(role),
        avatar_color=ROLE_COLORS[role],
    )


STAFF_ACCOUNTS: tuple[StaffAccount, ...] = (
    _account("Adit Pratama", "adit@spmcafe.com", "+62 812-0000-1111", "Pemilik", "Hari ini, 08:45"),
    _account("Sinta Dewi", "sinta@spmcafe.com", "+62 812-0000-2222", "Manager", "Kemarin, 17:20"),
    _account("Rudi Hartono", "rudi@spmcafe.com", "+62 812-0000-3333", "Supervisor", "3 hari lalu, 10:05"),
    _account("Mila Anggraini", "kasir@spmcafe.com", "+62 812-0000-4444", "Staff Kasir", "Hari ini, 09:10"),
    _account("Beni Saputra", "kitchen@spmcafe.com", "+62 812-0000-5555", "Staff Kitchen", "Kemarin, 21:40"),
)

# Store-wide owner login, separate from the personal staff accounts.
OWNER_ADMIN_ACCOUNT = _account("Admin SPM Café", "admin@spmcafe.id", "", "Pemilik", "", password="spm-admin")

ALL_ACCOUNTS = (*STAFF_ACCOUNTS, OWNER_ADMIN_ACCOUNT)
