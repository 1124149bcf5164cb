"""Integration tests for the menu and product record endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from menu.api.routes import menu_router, product_admin_router
from menu.product.management import get_product_record
from shared.api import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(menu_router)
    app.include_router(product_admin_router)
    return TestClient(app)


class TestMenuEndpoints:
    def test_list_categories(self, client):
        response = client.get("/menu/categories")
        assert response.status_code == 200
        slugs = [category["slug"] for category in response.json()["data"]]
        assert slugs == ["pistachio-series", "matcha-club", "master-soe-series", "merchandise"]

    def test_list_products_by_category(self, client):
        response = client.get("/menu/products", params={"category": "merchandise"})
        assert len(response.json()["data"]) == 4

    def test_search(self, client):
        response = client.get("/menu/search", params={"q": "latte"})
        ids = [product["id"] for product in response.json()["data"]]
        assert ids == ["pistachio-latte", "matcha-latte"]

    def test_product_detail_includes_option_groups(self, client):
        response = client.get("/menu/products/matcha-latte")
        assert response.status_code == 200
        body = response.json()
        assert body["categoryTitle"] == "Matcha Club"
        assert [group["id"] for group in body["optionGroups"]] == ["size", "ice", "sugar", "addons"]

    def test_unknown_product_is_404(self, client):
        response = client.get("/menu/products/espresso")
        assert response.status_code == 404
        assert response.json()["message"] == "Produk `espresso` tidak ditemukan"

    def test_resolve_selection(self, client):
        response = client.post(
            "/menu/products/matcha-latte/selection",
            json={"singles": {"size": "large"}, "multiples": {"addons": ["boba"]}},
        )
        assert response.status_code == 200
        assert response.json()["addOnTotal"] == 13000


class TestProductRecordEndpoints:
    def test_create_product(self, client):
        response = client.post(
            "/api/products",
            json={"id": "kopi-susu", "name": "Kopi Susu", "price": 28000, "imageUrl": "/img/kopi.jpg"},
        )
        assert response.status_code == 201
        assert response.json()["message"] == "Produk ditambahkan"
        assert get_product_record("kopi-susu").image_url == "/img/kopi.jpg"

    def test_create_product_missing_fields(self, client):
        response = client.post("/api/products", json={"id": "kopi-susu"})
        assert response.status_code == 400
        assert response.json()["message"] == "id, name, price wajib diisi"

    def test_list_products(self, client):
        client.post("/api/products", json={"id": "kopi-susu", "name": "Kopi Susu", "price": 28000})
        response = client.get("/api/products")
        assert [product["id"] for product in response.json()["data"]] == ["kopi-susu"]

    def test_update_and_delete_product(self, client):
        client.post("/api/products", json={"id": "kopi-susu", "name": "Kopi Susu", "price": 28000})

        response = client.patch("/api/products/kopi-susu", json={"soldOut": True})
        assert response.status_code == 200
        assert response.json()["product"]["soldOut"] is True

        response = client.delete("/api/products/kopi-susu")
        assert response.json() == {"message": "Produk dihapus"}
