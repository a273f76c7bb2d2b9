"""Read models handed to the HTTP API and the CLI.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world. Money is
rendered as a plain decimal string (``"159.48"``) so no float ever
appears in a response.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from storefront.domain.model.order import Order

EMPTY_CART_MESSAGE = "Your cart is empty."


@dataclass(frozen=True)
class ShippingSpec:
    """Input: shipping fields as submitted by the caller (possibly blank)."""

    address_line1: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    address_line2: str | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: int
    product_title: str
    quantity: int
    price_at_purchase: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderItemDTO]
    total_amount: str
    shipping_address_line1: str
    shipping_address_line2: str | None
    shipping_city: str
    shipping_postal_code: str
    shipping_country: str
    created_at: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PlaceOrderResult:
    """Output of checkout: either the created order or a benign message."""

    order: OrderDTO | None = None
    message: str | None = None

    @property
    def created(self) -> bool:
        return self.order is not None


def to_order_dto(order: Order) -> OrderDTO:
    if order.id is None:
        raise ValueError("Only a stored order has a read model")
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_title=item.product_title,
                quantity=item.quantity.value,
                price_at_purchase=f"{item.price_at_purchase.amount:.2f}",
                line_total=f"{item.line_total.amount:.2f}",
            )
            for item in order.items
        ],
        total_amount=f"{order.total_amount.amount:.2f}",
        shipping_address_line1=order.shipping.address_line1,
        shipping_address_line2=order.shipping.address_line2,
        shipping_city=order.shipping.city,
        shipping_postal_code=order.shipping.postal_code,
        shipping_country=order.shipping.country,
        created_at=order.created_at.isoformat(),
    )
