"""Application service: Set Order Status use case (admin).

Moving an order into CANCELLED returns its items' stock to the catalog,
in the same unit of work as the status change. The status write is a
compare-and-set against the status the order was loaded with, so two
concurrent cancellations cannot both restock.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import ConflictError, OrderNotFoundError, PersistenceError
from storefront.domain.identity import Identity
from storefront.domain.model.order import OrderStatus
from storefront.domain.service.stock_service import StockService
from storefront.domain.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class SetOrderStatusHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, requested_status: str | None, actor: Identity) -> OrderDTO:
        actor.require_admin()
        new_status = OrderStatus.parse(requested_status)

        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order #{order_id} not found")

            old_status = order.status
            needs_restock = order.change_status(new_status)

            if not uow.orders.update_status(order_id, new_status, expected=old_status):
                raise ConflictError(
                    f"Order #{order_id} was modified concurrently, please retry"
                )
            if needs_restock:
                StockService(uow.products).restock_for_order(order)

            updated = uow.orders.get_by_id(order_id)
            if updated is None:
                raise PersistenceError(f"Order #{order_id} could not be read back")
            uow.commit()

        if needs_restock:
            logger.info("Order #%s cancelled by %s, stock restored", order_id, actor.user_id)
        else:
            logger.info(
                "Order #%s status %s -> %s by %s",
                order_id,
                old_status.value,
                new_status.value,
                actor.user_id,
            )
        return to_order_dto(updated)
