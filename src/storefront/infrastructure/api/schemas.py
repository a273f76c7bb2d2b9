"""Request bodies accepted by the HTTP API.

Fields are optional at this level on purpose: missing shipping fields are
reported by the domain with a message naming them, as a 400.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from storefront.application.dto import ShippingSpec


class CreateOrderRequest(BaseModel):
    shipping_address_line1: Optional[str] = None
    shipping_address_line2: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_postal_code: Optional[str] = None
    shipping_country: Optional[str] = None

    def to_spec(self) -> ShippingSpec:
        return ShippingSpec(
            address_line1=self.shipping_address_line1,
            address_line2=self.shipping_address_line2,
            city=self.shipping_city,
            postal_code=self.shipping_postal_code,
            country=self.shipping_country,
        )


class UpdateStatusRequest(BaseModel):
    status: Optional[str] = None
