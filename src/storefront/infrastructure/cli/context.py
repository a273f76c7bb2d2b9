"""Lazy access to the composition root for CLI commands."""

from __future__ import annotations

from functools import lru_cache

from storefront.domain.identity import ADMIN_ROLE, Identity
from storefront.domain.unit_of_work import UnitOfWorkFactory
from storefront.infrastructure.bootstrap import Container, build_container

# Status changes from the command line are made by the operator.
OPERATOR = Identity(user_id="cli-operator", role=ADMIN_ROLE)


@lru_cache
def container() -> Container:
    return build_container()


def uow_factory() -> UnitOfWorkFactory:
    return container().uow_factory()
