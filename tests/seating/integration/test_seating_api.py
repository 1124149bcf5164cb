"""Integration tests for table and cashier card endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.order.creation import create_order
from seating.api.routes import admin_table_router, cashier_router, table_access_router, table_records_router
from shared.api import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(table_records_router)
    app.include_router(admin_table_router)
    app.include_router(table_access_router)
    app.include_router(cashier_router)
    return TestClient(app)


class TestTableRecordEndpoints:
    def test_crud(self, client):
        response = client.post("/api/tables", json={"slug": "M-01", "name": "Meja 01"})
        assert response.status_code == 201
        assert response.json()["message"] == "Meja ditambahkan"

        response = client.patch("/api/tables/M-01", json={"active": False})
        assert response.json()["table"]["active"] is False

        assert [table["slug"] for table in client.get("/api/tables").json()["data"]] == ["M-01"]

        assert client.delete("/api/tables/M-01").json() == {"message": "Meja dihapus"}
        assert client.get("/api/tables").json()["data"] == []

    def test_create_without_name(self, client):
        response = client.post("/api/tables", json={"slug": "M-01"})
        assert response.status_code == 400
        assert response.json()["message"] == "slug dan name wajib diisi"

    def test_rejected_update_leaves_table_unchanged(self, client):
        client.post("/api/tables", json={"slug": "M-01", "name": "Meja 01"})
        response = client.patch("/api/tables/M-01", json={"name": "Renamed", "active": "nope"})
        assert response.status_code == 400
        (table,) = client.get("/api/tables").json()["data"]
        assert table["name"] == "Meja 01"
        assert table["active"] is True

    def test_update_unknown(self, client):
        assert client.patch("/api/tables/M-09", json={"name": "x"}).status_code == 404


class TestAdminTableEndpoints:
    def test_requires_login(self, client):
        assert client.get("/admin/tables").status_code == 401

    def test_bootstrap_add_toggle_delete(self, client, auth_headers):
        response = client.post("/admin/tables/bootstrap", headers=auth_headers)
        assert len(response.json()["data"]) == 3

        response = client.post("/admin/tables", headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["slug"] == "M-04"

        response = client.post("/admin/tables/M-02/toggle", headers=auth_headers)
        assert response.json()["active"] is False

        assert client.delete("/admin/tables/M-04", headers=auth_headers).json() == {"status": "ok"}
        assert client.delete("/admin/tables/M-04", headers=auth_headers).status_code == 404

    def test_qr_download(self, client, auth_headers):
        client.post("/admin/tables/bootstrap", headers=auth_headers)
        response = client.get("/admin/tables/M-01/qr.png", headers=auth_headers)
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")
        assert 'filename="M-01-qr.png"' in response.headers["content-disposition"]

    def test_cashier_role_cannot_manage_tables(self, client, staff_token):
        headers = {"Authorization": f"Bearer {staff_token('kasir@spmcafe.com', 'spmlogin1')}"}
        assert client.get("/admin/tables", headers=headers).status_code == 401


class TestTableAccessEndpoint:
    def test_inactive_table(self, client):
        client.post("/api/tables", json={"slug": "M-01", "name": "Meja 01", "active": False})
        response = client.get("/tables/m-01/access")
        assert response.json() == {"requestedSlug": "M-01", "tableId": None, "active": False, "label": "M-01"}

    def test_takeaway(self, client):
        response = client.get("/tables/takeaway/access")
        body = response.json()
        assert body["tableId"] == "TAKEAWAY-01"
        assert body["label"] == "Take Away 01"


class TestCashierEndpoints:
    @pytest.fixture()
    def headers(self, staff_token):
        return {"Authorization": f"Bearer {staff_token('kasir@spmcafe.com', 'spmlogin1')}"}

    def test_board(self, client, headers):
        response = client.get("/cashier/cards", headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert len(body["cards"]) == 11
        assert body["nextSuggestion"] == "A-11"
        assert body["availability"] == {"available": 11, "occupied": 0, "total": 11}

    def test_add_toggle_remove(self, client, headers):
        assert client.post("/cashier/cards", json={"code": "A-11"}, headers=headers).status_code == 201
        assert client.post("/cashier/cards/A-11/toggle", headers=headers).json()["status"] == "occupied"
        assert client.delete("/cashier/cards/A-11", headers=headers).status_code == 400

    def test_invalid_code(self, client, headers):
        response = client.post("/cashier/cards", json={"code": "X-1"}, headers=headers)
        assert response.status_code == 400

    def test_active_orders(self, client, headers):
        create_order(id="ORD-1", table_id="TAKEAWAY-01")
        response = client.get("/cashier/active-orders", headers=headers)
        body = response.json()
        assert body["activeCount"] == 1
        assert body["nextSlug"] == "TAKEAWAY-02"

    def test_kitchen_has_no_cashier_screen(self, client, staff_token):
        headers = {"Authorization": f"Bearer {staff_token('kitchen@spmcafe.com', 'spmlogin1')}"}
        assert client.get("/cashier/cards", headers=headers).status_code == 401
