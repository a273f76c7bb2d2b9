"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so order totals are exact to the cent; floats are rejected.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Amounts finer than a cent are rejected rather than rounded, so the
        value returned is exactly what a ``Numeric(_, 2)`` column stores.
        """
        if isinstance(amount, float):
            raise ValidationError("Money cannot be built from a float")
        try:
            value = Decimal(str(amount))
            cents = value.quantize(_CENT)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        if value != cents:
            raise ValidationError(
                f"Money amount cannot have more than 2 decimal places, got {amount}"
            )
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not count as one item
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ShippingDetails:
    """Where an order is delivered. Everything but ``address_line2`` is required."""

    address_line1: str
    city: str
    postal_code: str
    country: str
    address_line2: str | None = None

    @staticmethod
    def create(
        address_line1: str | None,
        city: str | None,
        postal_code: str | None,
        country: str | None,
        address_line2: str | None = None,
    ) -> ShippingDetails:
        required = {
            "address_line1": (address_line1 or "").strip(),
            "city": (city or "").strip(),
            "postal_code": (postal_code or "").strip(),
            "country": (country or "").strip(),
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ValidationError(
                "Shipping address, city, postal code, and country are required "
                f"(missing: {', '.join(missing)})"
            )
        line2 = address_line2.strip() if address_line2 and address_line2.strip() else None
        return ShippingDetails(address_line2=line2, **required)
