"""Application services: order queries."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import OrderNotFoundError
from storefront.domain.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int, user_id: str | None = None) -> OrderDTO:
        """Return one order.

        With *user_id*, orders belonging to anyone else are reported as
        not found rather than forbidden.
        """
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)

        if order is None:
            raise OrderNotFoundError(f"Order #{order_id} not found")
        if user_id is not None and order.user_id != user_id:
            raise OrderNotFoundError(
                f"Order #{order_id} not found or does not belong to this user"
            )
        return to_order_dto(order)


class ListOrdersHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def for_user(self, user_id: str) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.list_for_user(user_id)
        return [to_order_dto(o) for o in orders]

    def all(self) -> list[OrderDTO]:
        with self._uow_factory() as uow:
            orders = uow.orders.list_all()
        return [to_order_dto(o) for o in orders]
