"""Shared fixtures: a throwaway SQLite database wired like production."""

from __future__ import annotations

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.persistence.database import init_db
from storefront.infrastructure.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'storefront.db'}",
        JWT_SECRET="test-secret",
    )


@pytest.fixture
def container(settings) -> Container:
    container = build_container(settings)
    init_db(container.engine)
    yield container
    container.engine.dispose()


@pytest.fixture
def uow_factory(container):
    return container.uow_factory()


@pytest.fixture
def add_product(uow_factory):
    handler = AddProductHandler(uow_factory)

    def _add(title: str, price: str, stock: int):
        return handler.handle(title=title, price=price, stock_quantity=stock)

    return _add


@pytest.fixture
def add_to_cart(uow_factory):
    handler = AddToCartHandler(uow_factory)

    def _add(user_id: str, product_id: int, quantity: int):
        return handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)

    return _add
