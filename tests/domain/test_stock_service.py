"""Unit tests for the StockService domain service."""

import pytest

from storefront.domain.exceptions import InsufficientStockError
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails
from storefront.domain.service.stock_service import StockLine, StockService
from tests.fakes import FakeProductRepository, InMemoryStore

SHIPPING = ShippingDetails.create("1 Main St", "Springfield", "12345", "US")


def _order_for(*lines: tuple[int, int]) -> Order:
    order = Order.place(
        "user-1",
        [
            OrderItem(
                product_id=pid,
                product_title=f"Product {pid}",
                quantity=Quantity(qty),
                price_at_purchase=Money.of("10.00"),
            )
            for pid, qty in lines
        ],
        SHIPPING,
    )
    order.id = 7
    return order


class TestEnsureAvailable:

    def test_enough_stock_passes(self):
        store = InMemoryStore()
        product = store.add_product("Widget", "10.00", stock=5)
        StockService.ensure_available([StockLine(product.id, product, 5)])

    def test_first_short_line_reported(self):
        store = InMemoryStore()
        ok = store.add_product("Widget", "10.00", stock=10)
        short = store.add_product("Gadget", "10.00", stock=1)

        with pytest.raises(InsufficientStockError) as exc_info:
            StockService.ensure_available([StockLine(ok.id, ok, 2), StockLine(short.id, short, 5)])

        err = exc_info.value
        assert err.product_id == short.id
        assert (err.requested, err.available) == (5, 1)
        assert 'Insufficient stock for "Gadget". Available: 1, Requested: 5.' == str(err)


class TestTakeAndRestock:

    def test_take_decrements_each_line(self):
        store = InMemoryStore()
        store.add_product("Widget", "10.00", stock=10)
        store.add_product("Gadget", "10.00", stock=3)
        svc = StockService(FakeProductRepository(store))

        svc.take_for_order(_order_for((1, 2), (2, 3)))

        assert store.products[1].stock_quantity == 8
        assert store.products[2].stock_quantity == 0

    def test_take_refuses_to_go_negative(self):
        store = InMemoryStore()
        store.add_product("Widget", "10.00", stock=1)
        svc = StockService(FakeProductRepository(store))

        with pytest.raises(InsufficientStockError):
            svc.take_for_order(_order_for((1, 2)))
        assert store.products[1].stock_quantity == 1

    def test_restock_increments_each_line(self):
        store = InMemoryStore()
        store.add_product("Widget", "10.00", stock=0)
        svc = StockService(FakeProductRepository(store))

        svc.restock_for_order(_order_for((1, 3)))

        assert store.products[1].stock_quantity == 3

    def test_restock_skips_vanished_product(self, caplog):
        store = InMemoryStore()
        store.add_product("Widget", "10.00", stock=0)
        svc = StockService(FakeProductRepository(store))

        svc.restock_for_order(_order_for((99, 1), (1, 2)))

        assert store.products[1].stock_quantity == 2
        assert "product 99 no longer exists" in caplog.text
