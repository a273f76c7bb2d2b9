"""SQLAlchemy implementation of the Unit of Work.

One Session per unit of work; every repository in it shares that
Session, so everything they do lands in one database transaction.
Storage faults leave as PersistenceError after a full rollback.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import PersistenceError
from storefront.domain.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import SqlProductRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session)
        self.carts = SqlCartRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        return self

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work used outside its with-block")
        return self._session

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self.session.close()
            self._session = None

        if isinstance(exc, SQLAlchemyError):
            logger.error("Unit of work rolled back after storage error: %s", exc)
            raise PersistenceError("The operation could not be completed") from exc

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed, rolling back: %s", exc)
            raise PersistenceError("The operation could not be completed") from exc

    def rollback(self) -> None:
        try:
            self.session.rollback()
        except SQLAlchemyError as exc:
            logger.error("Rollback failed: %s", exc)
            raise PersistenceError("The operation could not be completed") from exc
