"""Builds the engine, session factory and identity provider from settings.

HTTP routes and CLI commands get their unit-of-work factory from the
Container built here.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.unit_of_work import UnitOfWorkFactory
from storefront.infrastructure.identity.jwt_identity import JwtIdentityProvider
from storefront.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlAlchemyUnitOfWork
from storefront.infrastructure.settings import Settings, get_settings


@dataclass
class Container:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    identity_provider: JwtIdentityProvider

    def uow_factory(self) -> UnitOfWorkFactory:
        return lambda: SqlAlchemyUnitOfWork(self.session_factory)


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()
    engine = create_database_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    return Container(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        identity_provider=JwtIdentityProvider(settings.JWT_SECRET, settings.JWT_ALGORITHM),
    )
