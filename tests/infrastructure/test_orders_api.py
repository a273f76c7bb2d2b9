"""HTTP tests for the order routes, through FastAPI's TestClient."""

import asyncio
import json

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import ConflictError, PersistenceError
from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.api.exception_handlers import domain_exception_handler
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository

BODY = {
    "shipping_address_line1": "221B Baker Street",
    "shipping_city": "London",
    "shipping_postal_code": "NW1 6XE",
    "shipping_country": "UK",
}


@pytest.fixture
def client(container):
    return TestClient(create_app(container))


@pytest.fixture
def auth(container):
    def _headers(user_id: str, role: str = "CUSTOMER") -> dict[str, str]:
        token = container.identity_provider.issue(user_id, role)
        return {"Authorization": f"Bearer {token}"}

    return _headers


class TestCreateOrder:

    def test_created(self, client, auth, add_product, add_to_cart):
        a = add_product("Headphones", "59.99", 10)
        b = add_product("Charger", "39.50", 5)
        add_to_cart("alice", a.id, 2)
        add_to_cart("alice", b.id, 1)

        response = client.post("/api/orders/createOrder", json=BODY, headers=auth("alice"))

        assert response.status_code == 201
        body = response.json()
        assert body["user_id"] == "alice"
        assert body["status"] == "PROCESSING"
        assert body["total_amount"] == "159.48"
        assert body["shipping_address_line2"] is None
        assert [(i["product_id"], i["quantity"]) for i in body["items"]] == [(a.id, 2), (b.id, 1)]

    def test_empty_cart_is_not_an_error(self, client, auth):
        response = client.post("/api/orders/createOrder", json=BODY, headers=auth("alice"))

        assert response.status_code == 200
        assert response.json() == {"message": "Your cart is empty."}

    def test_missing_shipping_field(self, client, auth, add_product, add_to_cart):
        p = add_product("Lamp", "24.00", 5)
        add_to_cart("alice", p.id, 1)
        body = dict(BODY, shipping_city="  ")

        response = client.post("/api/orders/createOrder", json=body, headers=auth("alice"))

        assert response.status_code == 400
        assert "city" in response.json()["message"]

    def test_insufficient_stock(self, client, auth, add_product, add_to_cart):
        p = add_product("Lamp", "24.00", 1)
        add_to_cart("alice", p.id, 3)

        response = client.post("/api/orders/createOrder", json=BODY, headers=auth("alice"))

        assert response.status_code == 400
        assert response.json() == {
            "message": 'Insufficient stock for "Lamp". Available: 1, Requested: 3.'
        }

    def test_no_token(self, client):
        response = client.post("/api/orders/createOrder", json=BODY)

        assert response.status_code == 401
        assert response.json() == {"message": "No token provided"}

    def test_invalid_token(self, client):
        response = client.post(
            "/api/orders/createOrder", json=BODY, headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}


class TestReadOrders:

    @pytest.fixture
    def order_id(self, client, auth, add_product, add_to_cart):
        p = add_product("Lamp", "24.00", 5)
        add_to_cart("alice", p.id, 1)
        return client.post("/api/orders/createOrder", json=BODY, headers=auth("alice")).json()["id"]

    def test_my_orders(self, client, auth, order_id):
        assert [o["id"] for o in client.get("/api/orders/myOrder", headers=auth("alice")).json()] == [order_id]
        assert client.get("/api/orders/myOrder", headers=auth("bob")).json() == []

    def test_my_order_of_someone_else_is_not_found(self, client, auth, order_id):
        response = client.get(f"/api/orders/myOrder/{order_id}", headers=auth("bob"))

        assert response.status_code == 404

    def test_admin_routes_need_admin(self, client, auth, order_id):
        assert client.get("/api/orders/getOrders", headers=auth("alice")).status_code == 403
        assert client.get(f"/api/orders/{order_id}", headers=auth("alice")).status_code == 403

        listed = client.get("/api/orders/getOrders", headers=auth("root", "ADMIN"))
        assert listed.status_code == 200
        assert [o["id"] for o in listed.json()] == [order_id]

    def test_non_numeric_id_is_bad_request(self, client, auth):
        response = client.get("/api/orders/myOrder/abc", headers=auth("alice"))

        assert response.status_code == 400


class TestUpdateStatus:

    @pytest.fixture
    def placed(self, client, auth, add_product, add_to_cart):
        p = add_product("Drill", "89.00", 5)
        add_to_cart("alice", p.id, 2)
        order = client.post("/api/orders/createOrder", json=BODY, headers=auth("alice")).json()
        return order["id"], p.id

    def _stock(self, uow_factory, product_id):
        with uow_factory() as uow:
            return uow.products.get_by_id(product_id).stock_quantity

    def test_cancel_restores_stock(self, client, auth, uow_factory, placed):
        order_id, product_id = placed
        assert self._stock(uow_factory, product_id) == 3

        response = client.patch(
            f"/api/orders/{order_id}/status", json={"status": "cancelled"}, headers=auth("root", "ADMIN")
        )

        assert response.status_code == 200
        assert response.json()["status"] == "CANCELLED"
        assert self._stock(uow_factory, product_id) == 5

    def test_reopening_cancelled_order_conflicts(self, client, auth, placed):
        order_id, _ = placed
        admin = auth("root", "ADMIN")
        client.patch(f"/api/orders/{order_id}/status", json={"status": "CANCELLED"}, headers=admin)

        response = client.patch(f"/api/orders/{order_id}/status", json={"status": "SHIPPED"}, headers=admin)

        assert response.status_code == 409

    @pytest.mark.parametrize("payload", [{}, {"status": "LOST"}])
    def test_invalid_status(self, client, auth, placed, payload):
        order_id, _ = placed

        response = client.patch(f"/api/orders/{order_id}/status", json=payload, headers=auth("root", "ADMIN"))

        assert response.status_code == 400

    def test_unknown_order(self, client, auth):
        response = client.patch("/api/orders/999/status", json={"status": "SHIPPED"}, headers=auth("root", "ADMIN"))

        assert response.status_code == 404
        assert response.json() == {"message": "Order #999 not found"}

    def test_customer_forbidden(self, client, auth, placed):
        order_id, _ = placed

        response = client.patch(f"/api/orders/{order_id}/status", json={"status": "SHIPPED"}, headers=auth("alice"))

        assert response.status_code == 403


class TestErrorResponses:

    def test_storage_fault_is_opaque_500(self, client, auth, monkeypatch):
        def broken(self, user_id):
            raise PersistenceError("disk I/O error on orders")

        monkeypatch.setattr(SqlOrderRepository, "list_for_user", broken)

        response = client.get("/api/orders/myOrder", headers=auth("alice"))

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

    def test_cart_changed_during_checkout_is_conflict(self, client, auth, monkeypatch):
        def changed(self, user_id, shipping):
            raise ConflictError("Your cart changed during checkout, please retry")

        monkeypatch.setattr(PlaceOrderHandler, "handle", changed)

        response = client.post("/api/orders/createOrder", json=BODY, headers=auth("alice"))

        assert response.status_code == 409
        assert response.json() == {"message": "Your cart changed during checkout, please retry"}

    def test_handler_given_foreign_exception_answers_500(self):
        request = Request(
            {
                "type": "http",
                "method": "GET",
                "scheme": "http",
                "server": ("testserver", 80),
                "path": "/api/orders/myOrder",
                "root_path": "",
                "query_string": b"",
                "headers": [],
            }
        )

        response = asyncio.run(domain_exception_handler(request, RuntimeError("boom")))

        assert response.status_code == 500
        assert json.loads(response.body) == {"message": "Internal server error"}
