"""Abstract repository for the Order aggregate (the order ledger)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> int:
        """Persist a new order with its items; sets and returns its ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with its items, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return a user's orders, most recent first."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, most recent first."""

    @abstractmethod
    def update_status(
        self,
        order_id: int,
        status: OrderStatus,
        expected: OrderStatus,
    ) -> bool:
        """Set the status only if the stored status is still *expected*.

        Returns False (and changes nothing) when it is not. No other order
        field is ever updated.
        """
