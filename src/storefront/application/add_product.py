"""Application service: Add Product use case (catalog seeding)."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.unit_of_work import UnitOfWorkFactory


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, title: str, price: str, stock_quantity: int) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(title, Money.of(price), stock_quantity)
        with self._uow_factory() as uow:
            uow.products.add(product)
            uow.commit()
        return product
