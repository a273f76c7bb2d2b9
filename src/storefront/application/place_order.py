"""Application service: Place Order use case (checkout).

Converts the user's current cart into exactly one order. Steps:

1. Validate shipping details before any data access.
2. Read the cart and a fresh snapshot of every product in it. Prices are
   taken from the catalog now, never from anything cached in the cart.
3. Empty cart -> benign "cart is empty" result, nothing created.
4. Check stock for every line (fail fast, precise message).
5. Build the order; its total is the exact Decimal sum of line totals.
6. In one unit of work: re-load the cart and make sure it still holds the
   lines that were priced, insert the order and its items, decrement
   stock relatively per line, delete exactly the ordered cart lines, and
   re-read the order as it will be committed.

A failure anywhere in step 6 rolls the whole unit of work back. A cart
that changed after step 2 (a second checkout of the same cart, or a line
added meanwhile) fails with ConflictError and nothing is ordered.
"""

from __future__ import annotations

import logging

from storefront.application.dto import (
    EMPTY_CART_MESSAGE,
    PlaceOrderResult,
    ShippingSpec,
    to_order_dto,
)
from storefront.domain.exceptions import ConflictError, PersistenceError, ProductNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderItem
from storefront.domain.model.value_objects import Quantity, ShippingDetails
from storefront.domain.service.stock_service import StockLine, StockService
from storefront.domain.unit_of_work import UnitOfWork, UnitOfWorkFactory

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str, shipping: ShippingSpec) -> PlaceOrderResult:
        details = ShippingDetails.create(
            address_line1=shipping.address_line1,
            city=shipping.city,
            postal_code=shipping.postal_code,
            country=shipping.country,
            address_line2=shipping.address_line2,
        )

        # Read phase: nothing is written, the unit of work is never committed.
        with self._uow_factory() as uow:
            cart = uow.carts.get_for_user(user_id)
            if cart is None or cart.is_empty:
                logger.info("Checkout for user %s skipped: cart is empty", user_id)
                return PlaceOrderResult(message=EMPTY_CART_MESSAGE)
            lines = self._load_lines(uow, cart)

        StockService.ensure_available(lines)

        order = Order.place(
            user_id=user_id,
            items=[
                OrderItem(
                    product_id=line.product_id,
                    product_title=line.product.title,
                    quantity=Quantity(line.quantity),
                    price_at_purchase=line.product.price,  # <-- price snapshot
                )
                for line in lines
            ],
            shipping=details,
        )

        # Write phase: all or nothing.
        with self._uow_factory() as uow:
            current = uow.carts.get_for_user(user_id)
            if current is None or _line_keys(current) != _line_keys(cart):
                logger.warning("Checkout for user %s aborted: cart changed since it was read", user_id)
                raise ConflictError("Your cart changed during checkout, please retry")

            order_id = uow.orders.add(order)
            StockService(uow.products).take_for_order(order)
            uow.carts.clear(current)
            created = uow.orders.get_by_id(order_id)
            if created is None:
                raise PersistenceError(f"Order #{order_id} could not be read back")
            uow.commit()

        logger.info(
            "Order #%s placed for user %s: %d item(s), total %s",
            order_id,
            user_id,
            len(order.items),
            order.total_amount,
        )
        return PlaceOrderResult(order=to_order_dto(created))

    @staticmethod
    def _load_lines(uow: UnitOfWork, cart: Cart) -> list[StockLine]:
        lines: list[StockLine] = []
        for item in cart.items:
            product = uow.products.get_by_id(item.product_id)
            if product is None or product.is_deleted:
                raise ProductNotFoundError(f"Product with ID {item.product_id} not found.")
            lines.append(
                StockLine(product_id=item.product_id, product=product, quantity=item.quantity.value)
            )
        return lines


def _line_keys(cart: Cart) -> list[tuple[int, int]]:
    return sorted((item.product_id, item.quantity.value) for item in cart.items)
