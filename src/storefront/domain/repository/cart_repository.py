"""Abstract repository for the Cart aggregate (the cart store)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: str) -> Cart | None:
        """Return the user's cart with its items, or None if they have none."""

    @abstractmethod
    def add_item(self, user_id: str, product_id: int, quantity: int) -> Cart:
        """Add *quantity* of a product, creating the cart or merging the line."""

    @abstractmethod
    def clear(self, cart: Cart) -> None:
        """Delete exactly the line items of *cart* as they were read.

        Raises ConflictError when any of those lines is gone or has a
        different quantity. The cart itself is kept.
        """
