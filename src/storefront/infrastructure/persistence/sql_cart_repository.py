"""SQLAlchemy-backed implementation of CartRepository."""

from __future__ import annotations

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.orm import Session, selectinload

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.models import CartItemRow, CartRow


class SqlCartRepository(CartRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- CartRepository interface ---------------------------------------------

    def get_for_user(self, user_id: str) -> Cart | None:
        row = self._load(user_id)
        return self._to_domain(row) if row is not None else None

    def add_item(self, user_id: str, product_id: int, quantity: int) -> Cart:
        row = self._load(user_id)
        if row is None:
            row = CartRow(user_id=user_id)
            self._session.add(row)

        for item in row.items:
            if item.product_id == product_id:
                item.quantity += quantity
                break
        else:
            row.items.append(CartItemRow(product_id=product_id, quantity=quantity))

        self._session.flush()
        return self._to_domain(row)

    def clear(self, cart: Cart) -> None:
        if not cart.items:
            return
        # At most one row per product (uq_cart_items_cart_product).
        read_lines = or_(
            *(
                and_(
                    CartItemRow.product_id == item.product_id,
                    CartItemRow.quantity == item.quantity.value,
                )
                for item in cart.items
            )
        )
        result = self._session.execute(
            delete(CartItemRow)
            .where(CartItemRow.cart_id == cart.id, read_lines)
            .execution_options(synchronize_session=False)
        )
        self._session.expire_all()
        if result.rowcount != len(cart.items):
            raise ConflictError(
                f"Cart of user {cart.user_id} changed during checkout, please retry"
            )

    # --- Serialization --------------------------------------------------------

    def _load(self, user_id: str) -> CartRow | None:
        return self._session.scalars(
            select(CartRow)
            .where(CartRow.user_id == user_id)
            .options(selectinload(CartRow.items))
            .execution_options(populate_existing=True)
        ).one_or_none()

    @staticmethod
    def _to_domain(row: CartRow) -> Cart:
        return Cart(
            id=row.id,
            user_id=row.user_id,
            items=[
                CartItem(product_id=item.product_id, quantity=Quantity(item.quantity))
                for item in row.items
            ],
        )
