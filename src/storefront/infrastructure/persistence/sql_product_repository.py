"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.domain.exceptions import InsufficientStockError, ProductNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.models import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id, populate_existing=True)
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.scalars(
            select(ProductRow).where(ProductRow.is_deleted.is_(False)).order_by(ProductRow.id)
        )
        return [self._to_domain(row) for row in rows]

    def add(self, product: Product) -> Product:
        row = ProductRow(
            title=product.title,
            price=product.price.amount,
            stock_quantity=product.stock_quantity,
            is_deleted=product.is_deleted,
        )
        self._session.add(row)
        self._session.flush()
        product.id = row.id
        return product

    def adjust_stock(self, product_id: int, delta: int) -> None:
        # One UPDATE evaluated by the database: the guard and the new value
        # are computed against the stored quantity, not a value read earlier.
        stmt = update(ProductRow).where(ProductRow.id == product_id)
        if delta < 0:
            stmt = stmt.where(ProductRow.stock_quantity >= -delta)
        stmt = stmt.values(stock_quantity=ProductRow.stock_quantity + delta).execution_options(
            synchronize_session=False
        )

        result = self._session.execute(stmt)
        if result.rowcount == 1:
            return

        row = self._session.get(ProductRow, product_id, populate_existing=True)
        if row is None:
            raise ProductNotFoundError(f"Product with ID {product_id} not found.")
        raise InsufficientStockError(
            product_id=product_id,
            product_title=row.title,
            requested=-delta,
            available=row.stock_quantity,
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            title=row.title,
            price=Money.of(row.price),
            stock_quantity=row.stock_quantity,
            is_deleted=row.is_deleted,
        )
