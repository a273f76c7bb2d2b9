"""Abstract repository for the Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product that is not soft-deleted."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and assign its ID."""

    @abstractmethod
    def adjust_stock(self, product_id: int, delta: int) -> None:
        """Add *delta* to the stored stock quantity in one indivisible step.

        A negative delta must be refused with InsufficientStockError when
        the stored quantity is smaller than ``-delta``; the stored value is
        left unchanged in that case. Raises ProductNotFoundError when no
        such product exists.
        """
