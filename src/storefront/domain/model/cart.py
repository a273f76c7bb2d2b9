"""Cart aggregate: a user's pending line items before checkout."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Quantity


@dataclass
class CartItem:
    product_id: int
    quantity: Quantity


@dataclass
class Cart:
    """One cart per user. Emptied by a successful checkout."""

    id: int | None
    user_id: str
    items: list[CartItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items
