"""FastAPI dependencies: the container, the caller's identity, handlers."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.application.place_order import PlaceOrderHandler
from storefront.application.set_order_status import SetOrderStatusHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import AuthError
from storefront.domain.identity import Identity
from storefront.infrastructure.bootstrap import Container

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    container: Container = Depends(get_container),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token provided")
    try:
        return container.identity_provider.resolve(credentials.credentials)
    except AuthError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to perform this action",
        )
    return identity


def get_place_order_handler(container: Container = Depends(get_container)) -> PlaceOrderHandler:
    return PlaceOrderHandler(container.uow_factory())


def get_set_order_status_handler(
    container: Container = Depends(get_container),
) -> SetOrderStatusHandler:
    return SetOrderStatusHandler(container.uow_factory())


def get_show_order_handler(container: Container = Depends(get_container)) -> ShowOrderHandler:
    return ShowOrderHandler(container.uow_factory())


def get_list_orders_handler(container: Container = Depends(get_container)) -> ListOrdersHandler:
    return ListOrdersHandler(container.uow_factory())
