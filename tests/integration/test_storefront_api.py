"""Integration tests for the storefront HTTP API."""

import pytest
from fastapi.testclient import TestClient

from storefront.api import create_api

BUYER = {
    "email": "ana@example.com",
    "firstName": "Ana",
    "lastName": "García",
    "address": "Calle Mayor 1",
    "city": "Madrid",
    "postalCode": "28013",
    "country": "Spain",
}


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("STOREFRONT_TAX_RATE", "0.21")
    return TestClient(create_api())


def _create_product(client, **overrides):
    payload = {
        "name": "Noise Cancelling Headphones",
        "slug": "noise-cancelling-headphones",
        "description": "Over-ear headphones with 30h battery.",
        "price": "100.00",
        "category": "Electronics",
        "type": "physical",
    }
    payload.update(overrides)
    response = client.post("/api/products", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()


class TestCategoryEndpoints:
    def test_create_list_and_get(self, client):
        response = client.post(
            "/api/categories",
            json={"name": "Electronics", "slug": "electronics", "icon": "fas fa-laptop", "productCount": 3},
        )
        assert response.status_code == 201
        assert response.json()["productCount"] == 3

        assert [c["slug"] for c in client.get("/api/categories").json()] == ["electronics"]
        assert client.get("/api/categories/electronics").json()["name"] == "Electronics"

    def test_missing_category(self, client):
        response = client.get("/api/categories/garden")
        assert response.status_code == 404
        assert response.json() == {
            "message": "Category `garden` does not exist",
            "errors": {"slug": ["Category `garden` does not exist"]},
        }


class TestProductEndpoints:
    def test_create_serializes_camel_case_and_decimal_strings(self, client):
        product = _create_product(client, originalPrice="129.99", isOnSale=True, stockQuantity=4)
        assert product["price"] == "100.00"
        assert product["originalPrice"] == "129.99"
        assert product["isOnSale"] is True
        assert product["stockQuantity"] == 4
        assert product["type"] == "physical"

    def test_get_by_id_and_slug(self, client):
        product = _create_product(client)
        assert client.get(f"/api/products/{product['id']}").json()["slug"] == product["slug"]
        assert client.get(f"/api/products/slug/{product['slug']}").json()["id"] == product["id"]

    def test_missing_product(self, client):
        assert client.get("/api/products/missing-product").status_code == 404
        assert client.get("/api/products/slug/missing-product").status_code == 404

    def test_invariant_violation_is_bad_request(self, client):
        response = client.post(
            "/api/products",
            json={
                "name": "Broken Sale",
                "slug": "broken-sale",
                "description": "On sale without an original price.",
                "price": "10.00",
                "category": "Electronics",
                "type": "physical",
                "isOnSale": True,
            },
        )
        assert response.status_code == 400
        assert "is_on_sale" in response.json()["errors"]

    def test_filters(self, client):
        _create_product(client, slug="vue-course", name="Frontend Course", type="digital", tags=["vue"], price="49.00")
        _create_product(client, slug="headphones", brand="Sonic", isFeatured=True)

        def slugs(params):
            return [p["slug"] for p in client.get("/api/products", params=params).json()]

        assert slugs({"search": "vue"}) == ["vue-course"]
        assert slugs({"type": "physical"}) == ["headphones"]
        assert slugs({"featured": "true"}) == ["headphones"]
        assert slugs({"priceMin": "50", "priceMax": "100"}) == ["headphones"]
        assert slugs({"brands[]": ["Sonic"]}) == ["headphones"]
        assert slugs({"category": "electronics"}) == ["vue-course", "headphones"]

    def test_update_and_delete(self, client):
        product = _create_product(client)

        response = client.put(f"/api/products/{product['id']}", json={"price": "80.00", "isFeatured": True})
        assert response.status_code == 200
        assert response.json()["price"] == "80.00"
        assert response.json()["isFeatured"] is True

        assert client.delete(f"/api/products/{product['id']}").status_code == 200
        assert client.get(f"/api/products/{product['id']}").status_code == 404


class TestCartEndpoints:
    def test_add_returns_item_and_summary(self, client):
        product = _create_product(client)
        response = client.post("/api/cart", json={"productId": product["id"], "quantity": 2})
        assert response.status_code == 200

        body = response.json()
        assert body["item"]["quantity"] == 2
        assert body["item"]["product"]["id"] == product["id"]
        assert body["summary"]["subtotal"] == "200.00"
        assert body["summary"]["tax"] == "42.00"
        assert body["summary"]["total"] == "242.00"
        assert body["summary"]["itemCount"] == 2
        assert body["message"]

    def test_cart_follows_session_cookie(self, client):
        product = _create_product(client)
        client.post("/api/cart", json={"productId": product["id"]})

        assert client.get("/api/cart").json()["itemCount"] == 1

        stranger = TestClient(client.app)
        assert stranger.get("/api/cart").json()["itemCount"] == 0

    def test_insufficient_stock(self, client):
        product = _create_product(client, stockQuantity=5)
        response = client.post("/api/cart", json={"productId": product["id"], "quantity": 6})
        assert response.status_code == 400
        assert response.json()["available"] == 5
        assert client.get("/api/cart").json()["items"] == []

    def test_unknown_product(self, client):
        response = client.post("/api/cart", json={"productId": "missing-product", "quantity": 1})
        assert response.status_code == 404

    def test_invalid_quantity(self, client):
        product = _create_product(client)
        response = client.post("/api/cart", json={"productId": product["id"], "quantity": 0})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"

    def test_update_and_remove_by_zero(self, client):
        product = _create_product(client)
        item_id = client.post("/api/cart", json={"productId": product["id"]}).json()["item"]["id"]

        response = client.put(f"/api/cart/{item_id}", json={"quantity": 4})
        assert response.json()["item"]["quantity"] == 4
        assert response.json()["summary"]["itemCount"] == 4

        response = client.put(f"/api/cart/{item_id}", json={"quantity": 0})
        assert response.status_code == 200
        assert response.json()["item"] is None
        assert response.json()["summary"]["itemCount"] == 0

    def test_update_line_of_deleted_product(self, client):
        product = _create_product(client)
        item_id = client.post("/api/cart", json={"productId": product["id"]}).json()["item"]["id"]
        client.delete(f"/api/products/{product['id']}")

        response = client.put(f"/api/cart/{item_id}", json={"quantity": 3})
        assert response.status_code == 404
        assert "item_id" in response.json()["errors"]

    def test_delete_line(self, client):
        product = _create_product(client)
        item_id = client.post("/api/cart", json={"productId": product["id"]}).json()["item"]["id"]

        response = client.delete(f"/api/cart/{item_id}")
        assert response.status_code == 200
        assert response.json()["summary"]["itemCount"] == 0

        assert client.delete(f"/api/cart/{item_id}").status_code == 404

    def test_clear(self, client):
        product = _create_product(client)
        client.post("/api/cart", json={"productId": product["id"], "quantity": 3})

        assert client.delete("/api/cart").status_code == 200
        assert client.delete("/api/cart").status_code == 200
        assert client.get("/api/cart").json()["itemCount"] == 0


class TestOrderEndpoints:
    def test_checkout(self, client):
        product = _create_product(client)
        client.post("/api/cart", json={"productId": product["id"], "quantity": 2})

        response = client.post("/api/orders", json=BUYER)
        assert response.status_code == 201

        order = response.json()["order"]
        assert order["total"] == "242.00"
        assert order["status"] == "pending"
        assert order["firstName"] == "Ana"
        assert order["lines"][0]["quantity"] == 2
        assert client.get("/api/cart").json()["itemCount"] == 0

        fetched = client.get(f"/api/orders/{order['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["total"] == "242.00"

    def test_empty_cart(self, client):
        response = client.post("/api/orders", json=BUYER)
        assert response.status_code == 400
        assert "cart" in response.json()["errors"]

    def test_empty_cart_with_overlong_phone(self, client):
        response = client.post("/api/orders", json={**BUYER, "phone": "1" * 25})
        assert response.status_code == 400
        assert response.json()["message"] == "Cart is empty"

    def test_invalid_buyer(self, client):
        product = _create_product(client)
        client.post("/api/cart", json={"productId": product["id"]})

        response = client.post("/api/orders", json={**BUYER, "email": "not-an-email", "postalCode": ""})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"email", "postal_code"}

    def test_missing_order(self, client):
        assert client.get("/api/orders/missing-order").status_code == 404


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["domain"] == "storefront"


class TestApplicationEntryPoint:
    """The uvicorn entry point in ``src/app.py`` serves the same routes."""

    @pytest.fixture()
    def app_client(self):
        from app import app

        return TestClient(app)

    def test_lists_catalogue(self, app_client):
        created = app_client.post(
            "/api/categories", json={"name": "Books", "slug": "books", "icon": "fas fa-book", "productCount": 0}
        )
        assert created.status_code == 201
        assert "books" in [c["slug"] for c in app_client.get("/api/categories").json()]

    def test_creates_and_lists_products(self, app_client):
        product = _create_product(app_client, slug="entry-point-headphones")
        slugs = [p["slug"] for p in app_client.get("/api/products").json()]
        assert product["slug"] in slugs
        assert app_client.get("/api/products/slug/entry-point-headphones").json()["id"] == product["id"]
