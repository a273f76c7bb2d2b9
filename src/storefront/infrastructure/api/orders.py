"""Order routes.

Handlers are plain ``def`` functions: FastAPI runs each request in its
own worker thread, and all shared state lives in the database.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront.application.place_order import PlaceOrderHandler
from storefront.application.set_order_status import SetOrderStatusHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.identity import Identity
from storefront.infrastructure.api.dependencies import (
    get_current_identity,
    get_list_orders_handler,
    get_place_order_handler,
    get_set_order_status_handler,
    get_show_order_handler,
    require_admin,
)
from storefront.infrastructure.api.schemas import CreateOrderRequest, UpdateStatusRequest

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/createOrder")
def create_order(
    body: CreateOrderRequest,
    identity: Identity = Depends(get_current_identity),
    handler: PlaceOrderHandler = Depends(get_place_order_handler),
) -> JSONResponse:
    result = handler.handle(identity.user_id, body.to_spec())
    if result.order is None:
        return JSONResponse(status_code=status.HTTP_200_OK, content={"message": result.message})
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=result.order.to_dict())


@router.get("/myOrder")
def get_my_orders(
    identity: Identity = Depends(get_current_identity),
    handler: ListOrdersHandler = Depends(get_list_orders_handler),
) -> list[dict[str, Any]]:
    return [dto.to_dict() for dto in handler.for_user(identity.user_id)]


@router.get("/myOrder/{order_id}")
def get_my_order(
    order_id: int,
    identity: Identity = Depends(get_current_identity),
    handler: ShowOrderHandler = Depends(get_show_order_handler),
) -> dict[str, Any]:
    return handler.handle(order_id, user_id=identity.user_id).to_dict()


@router.get("/getOrders")
def get_all_orders(
    _admin: Identity = Depends(require_admin),
    handler: ListOrdersHandler = Depends(get_list_orders_handler),
) -> list[dict[str, Any]]:
    return [dto.to_dict() for dto in handler.all()]


@router.get("/{order_id}")
def get_order(
    order_id: int,
    _admin: Identity = Depends(require_admin),
    handler: ShowOrderHandler = Depends(get_show_order_handler),
) -> dict[str, Any]:
    return handler.handle(order_id).to_dict()


@router.patch("/{order_id}/status")
def update_order_status(
    order_id: int,
    body: UpdateStatusRequest,
    admin: Identity = Depends(require_admin),
    handler: SetOrderStatusHandler = Depends(get_set_order_status_handler),
) -> dict[str, Any]:
    return handler.handle(order_id, body.status, actor=admin).to_dict()
