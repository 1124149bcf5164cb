"""Tests for staff roles and the screens each role may open."""

import pytest
from staff.account.roles import STAFF_ROLES, can_manage_store, default_route_for, is_route_allowed_for_role


class TestRouteAccess:
    @pytest.mark.parametrize(
        "role, path, allowed",
        [
            ("Pemilik", "/admin", True),
            ("Pemilik", "/cashier", True),
            ("Manager", "/admin/menu", True),
            ("Supervisor", "/orders", True),
            ("Supervisor", "/cashier", False),
            ("Staff Kasir", "/cashier?cards=A-01", True),
            ("Staff Kasir", "/admin", False),
            ("Staff Kasir", "/admin/profile", True),
            ("Staff Kitchen", "/orders", True),
            ("Staff Kitchen", "/cashier", False),
        ],
    )
    def test_role_prefixes(self, role, path, allowed):
        assert is_route_allowed_for_role(path, role) is allowed

    def test_root_prefix_only_admits_root(self):
        assert is_route_allowed_for_role("/", "Staff Kitchen")
        assert not is_route_allowed_for_role("/menu", "Staff Kitchen")

    def test_prefix_must_end_at_segment(self):
        assert not is_route_allowed_for_role("/admins", "Pemilik")

    def test_unknown_role_gets_root_only(self):
        assert is_route_allowed_for_role("/", "Tamu")
        assert not is_route_allowed_for_role("/admin", None)


class TestRoleDefaults:
    def test_default_routes(self):
        assert default_route_for("Pemilik") == "/admin"
        assert default_route_for("Staff Kasir") == "/cashier"
        assert default_route_for("Staff Kitchen") == "/orders"
        assert default_route_for(None) == "/admin"

    def test_store_managers(self):
        assert [role for role in STAFF_ROLES if can_manage_store(role)] == ["Pemilik", "Manager", "Supervisor"]
