"""Integration tests for the order query use cases."""

import pytest

from storefront.application.dto import ShippingSpec
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import OrderNotFoundError
from tests.fakes import FakeUnitOfWorkFactory, InMemoryStore

SHIPPING = ShippingSpec(address_line1="1 Main St", city="Springfield", postal_code="12345", country="US")


def _setup():
    store = InMemoryStore()
    store.add_product("Mug", "8.00", stock=100)
    factory = FakeUnitOfWorkFactory(store)
    place = PlaceOrderHandler(factory)
    ids = {}
    for user in ("alice", "bob", "alice"):
        store.put_in_cart(user, 1, 1)
        ids.setdefault(user, []).append(place.handle(user, SHIPPING).order.id)
    return factory, ids


class TestShowOrder:

    def test_owner_sees_order(self):
        factory, ids = _setup()
        dto = ShowOrderHandler(factory).handle(ids["alice"][0], user_id="alice")
        assert dto.user_id == "alice"

    def test_other_users_order_is_not_found(self):
        factory, ids = _setup()
        with pytest.raises(OrderNotFoundError, match="does not belong to this user"):
            ShowOrderHandler(factory).handle(ids["bob"][0], user_id="alice")

    def test_admin_view_has_no_owner_check(self):
        factory, ids = _setup()
        assert ShowOrderHandler(factory).handle(ids["bob"][0]).user_id == "bob"

    def test_missing_order(self):
        factory, _ = _setup()
        with pytest.raises(OrderNotFoundError):
            ShowOrderHandler(factory).handle(12345)


class TestListOrders:

    def test_user_sees_only_own_orders(self):
        factory, ids = _setup()
        dtos = ListOrdersHandler(factory).for_user("alice")
        assert sorted(d.id for d in dtos) == sorted(ids["alice"])

    def test_all_orders(self):
        factory, _ = _setup()
        assert len(ListOrdersHandler(factory).all()) == 3
