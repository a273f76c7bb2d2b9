"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity, ShippingDetails
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.models import OrderItemRow, OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> int:
        row = self._to_row(order)
        self._session.add(row)
        self._session.flush()
        order.id = row.id
        return row.id

    def get_by_id(self, order_id: int) -> Order | None:
        row = self._session.scalars(
            select(OrderRow)
            .where(OrderRow.id == order_id)
            .options(selectinload(OrderRow.items))
            .execution_options(populate_existing=True)
        ).one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_for_user(self, user_id: str) -> list[Order]:
        return self._list(select(OrderRow).where(OrderRow.user_id == user_id))

    def list_all(self) -> list[Order]:
        return self._list(select(OrderRow))

    def update_status(
        self,
        order_id: int,
        status: OrderStatus,
        expected: OrderStatus,
    ) -> bool:
        result = self._session.execute(
            update(OrderRow)
            .where(OrderRow.id == order_id, OrderRow.status == expected.value)
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    # --- Serialization --------------------------------------------------------

    def _list(self, stmt) -> list[Order]:
        rows = self._session.scalars(
            stmt.options(selectinload(OrderRow.items)).order_by(
                OrderRow.created_at.desc(), OrderRow.id.desc()
            )
        )
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_row(order: Order) -> OrderRow:
        return OrderRow(
            user_id=order.user_id,
            total_amount=order.total_amount.amount,
            status=order.status.value,
            shipping_address_line1=order.shipping.address_line1,
            shipping_address_line2=order.shipping.address_line2,
            shipping_city=order.shipping.city,
            shipping_postal_code=order.shipping.postal_code,
            shipping_country=order.shipping.country,
            created_at=order.created_at,
            items=[
                OrderItemRow(
                    product_id=item.product_id,
                    product_title=item.product_title,
                    quantity=item.quantity.value,
                    price_at_purchase=item.price_at_purchase.amount,
                )
                for item in order.items
            ],
        )

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        created_at = row.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; values are always written in UTC.
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=row.id,
            user_id=row.user_id,
            items=[
                OrderItem(
                    product_id=item.product_id,
                    product_title=item.product_title,
                    quantity=Quantity(item.quantity),
                    price_at_purchase=Money.of(item.price_at_purchase),
                )
                for item in row.items
            ],
            total_amount=Money.of(row.total_amount),
            shipping=ShippingDetails(
                address_line1=row.shipping_address_line1,
                address_line2=row.shipping_address_line2,
                city=row.shipping_city,
                postal_code=row.shipping_postal_code,
                country=row.shipping_country,
            ),
            status=OrderStatus(row.status),
            created_at=created_at,
        )
