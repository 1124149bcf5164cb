"""Staff roles and the screens each role may open."""

from enum import Enum


class StaffRole(Enum):
    OWNER = "Pemilik"
    MANAGER = "Manager"
    SUPERVISOR = "Supervisor"
    CASHIER = "Staff Kasir"
    KITCHEN = "Staff Kitchen"


STAFF_ROLES = tuple(role.value for role in StaffRole)

ROLE_DEFAULT_ROUTES = {
    StaffRole.OWNER.value: "/admin",
    StaffRole.MANAGER.value: "/admin",
    StaffRole.SUPERVISOR.value: "/orders",
    StaffRole.CASHIER.value: "/cashier",
    StaffRole.KITCHEN.value: "/orders",
}

ROLE_ALLOWED_PREFIXES = {
    StaffRole.OWNER.value: ["/", "/admin", "/admin/profile", "/cashier", "/orders"],
    StaffRole.MANAGER.value: ["/", "/admin", "/admin/profile", "/cashier", "/orders"],
    StaffRole.SUPERVISOR.value: ["/", "/admin", "/admin/profile", "/orders"],
    StaffRole.CASHIER.value: ["/", "/admin/profile", "/cashier"],
    StaffRole.KITCHEN.value: ["/", "/admin/profile", "/orders"],
}

ROLE_COLORS = {
    StaffRole.OWNER.value: "#34d399",
    StaffRole.MANAGER.value: "#60a5fa",
    StaffRole.SUPERVISOR.value: "#fbbf24",
    StaffRole.CASHIER.value: "#a855f7",
    StaffRole.KITCHEN.value: "#fb7185",
}


def is_route_allowed_for_role(path: str, role: str | None) -> bool:
    """A path is allowed when it equals a role prefix or lies beneath one.

    The query string is ignored. Note the root prefix ``/`` only admits the
    root itself, since nothing real lies beneath ``//``.
    """
    normalized = (path or "").split("?")[0]
    prefixes = ROLE_ALLOWED_PREFIXES.get(role or "", ["/"])
    return any(normalized == prefix or normalized.startswith(f"{prefix}/") for prefix in prefixes)


def default_route_for(role: str | None) -> str:
    return ROLE_DEFAULT_ROUTES.get(role or "", "/admin")


def can_manage_store(role: str | None) -> bool:
    """Owners, managers and supervisors may open the admin dashboard."""
    return is_route_allowed_for_role("/admin", role)
