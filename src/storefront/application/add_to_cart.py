"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity
from storefront.domain.unit_of_work import UnitOfWorkFactory


class AddToCartHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, user_id: str, product_id: int, quantity: int) -> Cart:
        """Add *quantity* units of a product to the user's cart.

        Stock is not checked here; checkout is where stock counts.
        """
        qty = Quantity(quantity)
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None or product.is_deleted:
                raise ProductNotFoundError(f"Product with ID {product_id} not found.")
            cart = uow.carts.add_item(user_id, product_id, qty.value)
            uow.commit()
        return cart
