"""Unit of Work: the transaction boundary for the order core.

Handlers open one unit of work per atomic operation::

    with self._uow_factory() as uow:
        ...                       # repository calls
        uow.commit()

Everything done through ``uow.products``, ``uow.carts`` and
``uow.orders`` inside the block commits together or not at all. Leaving
the block without calling ``commit()``, or with an exception, rolls back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):
    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # A committed unit of work has nothing left to undo.
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every change in this unit of work durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted change."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
