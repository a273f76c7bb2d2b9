"""Order aggregate: placed orders and their line items.

The Order is an aggregate root that owns its line items. Its total is
computed once, when the order is placed, and stored; status is the only
field that changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ConflictError, InvalidStatusError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails


class OrderStatus(Enum):
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, raw: str | None) -> OrderStatus:
        """Case-insensitive lookup, e.g. ``" shipped "`` -> SHIPPED."""
        if raw is None or not str(raw).strip():
            raise InvalidStatusError("New status is required")
        normalized = str(raw).strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise InvalidStatusError(
                f'Invalid status "{raw}". Allowed statuses are: {allowed}'
            ) from None


@dataclass
class OrderItem:
    """Captures the price of a product at purchase time.

    Immutable after creation; later catalog price changes do not reach it.
    """

    product_id: int
    product_title: str
    quantity: Quantity
    price_at_purchase: Money  # snapshot

    @property
    def line_total(self) -> Money:
        return self.price_at_purchase * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. The ``__init__`` stays simple so
    repositories can reconstitute stored orders (including the stored
    ``total_amount``) without recomputing anything.
    """

    id: int | None
    user_id: str
    items: list[OrderItem]
    total_amount: Money
    shipping: ShippingDetails
    status: OrderStatus = OrderStatus.PROCESSING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        user_id: str,
        items: list[OrderItem],
        shipping: ShippingDetails,
    ) -> Order:
        if not user_id:
            raise ValidationError("User ID is required")
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total_amount=Order.compute_total(items),
            shipping=shipping,
        )

    @staticmethod
    def compute_total(items: list[OrderItem]) -> Money:
        """Exact Decimal sum of ``quantity * price_at_purchase``."""
        total = Money.zero()
        for item in items:
            total = total + item.line_total
        return total

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> bool:
        """Apply a status change.

        Returns True when the change moves the order into CANCELLED from
        any other status, i.e. when the caller must return the items'
        stock to the catalog. Re-requesting CANCELLED returns False.

        A cancelled order cannot be reopened.
        """
        was_cancelled = self.is_cancelled
        if was_cancelled and new_status != OrderStatus.CANCELLED:
            raise ConflictError(
                f"Order #{self.id} is cancelled and cannot move to {new_status.value}"
            )
        self.status = new_status
        return self.is_cancelled and not was_cancelled

    # --- Computed properties --------------------------------------------------

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED
