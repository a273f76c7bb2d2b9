"""Product aggregate, as the order core sees it.

The catalog owns products. The order core reads them for price and
stock, and changes stock exclusively through
``ProductRepository.adjust_stock`` (a relative adjustment).
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A catalog product snapshot.

    An instance reflects the stored ``stock_quantity`` at the time it was
    read; it is never written back as an absolute value.
    """

    id: int | None
    title: str
    price: Money
    stock_quantity: int = 0
    is_deleted: bool = False

    @staticmethod
    def create(title: str, price: Money, stock_quantity: int) -> Product:
        if not title or not title.strip():
            raise ValidationError("Product title is required")
        if not isinstance(stock_quantity, int) or stock_quantity < 0:
            raise ValidationError("Stock quantity must be a non-negative integer")
        return Product(id=None, title=title.strip(), price=price, stock_quantity=stock_quantity)
