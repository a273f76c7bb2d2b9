"""Domain service: stock checks and adjustments for orders.

Takes stock out of the catalog when an order is placed and puts it back
when an order is cancelled. Stock never goes below zero and a cancelled
order is restocked exactly once.

Checkout uses a two-phase approach:
  Phase 1: ``ensure_available`` checks every line against the snapshot
           read before the transaction and fails fast with a precise
           message. Nothing is mutated.
  Phase 2: ``take_for_order`` runs inside the transaction and issues a
           relative, guarded decrement per line, so a concurrent checkout
           that got there first makes this one fail instead of oversell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.exceptions import InsufficientStockError, ProductNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockLine:
    """A requested quantity paired with the product snapshot it was checked against."""

    product_id: int
    product: Product
    quantity: int


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    @staticmethod
    def ensure_available(lines: list[StockLine]) -> None:
        """Raise InsufficientStockError for the first line that cannot be met."""
        for line in lines:
            if line.product.stock_quantity < line.quantity:
                logger.warning(
                    "Stock check failed for product %s: requested=%s available=%s",
                    line.product_id,
                    line.quantity,
                    line.product.stock_quantity,
                )
                raise InsufficientStockError(
                    product_id=line.product_id,
                    product_title=line.product.title,
                    requested=line.quantity,
                    available=line.product.stock_quantity,
                )

    def take_for_order(self, order: Order) -> None:
        """Decrement stock for every line of a newly placed order."""
        for item in order.items:
            self._product_repo.adjust_stock(item.product_id, -item.quantity.value)

    def restock_for_order(self, order: Order) -> None:
        """Return every line's quantity to the catalog.

        Products that have since disappeared from the catalog are skipped;
        order items only hold a weak reference to them.
        """
        for item in order.items:
            try:
                self._product_repo.adjust_stock(item.product_id, item.quantity.value)
            except ProductNotFoundError:
                logger.warning(
                    "Order #%s: product %s no longer exists, %s unit(s) not restocked",
                    order.id,
                    item.product_id,
                    item.quantity.value,
                )
