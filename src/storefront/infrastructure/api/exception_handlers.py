"""Exception handlers for the FastAPI application.

Maps each domain error kind to a status code. Every error body has the
shape ``{"message": str}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    AuthError,
    ConflictError,
    DomainException,
    ForbiddenError,
    InsufficientStockError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InsufficientStockError, status.HTTP_400_BAD_REQUEST),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: DomainException) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, DomainException):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    code = status_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        message = "Internal server error"
    else:
        logger.info("%s %s rejected (%d): %s", request.method, request.url.path, code, exc)
        message = str(exc)
    return JSONResponse(status_code=code, content={"message": message})


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"message": http_exc.detail},
        headers=getattr(http_exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed path or body parameters are client errors (400)."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(exc)})

    fields = [".".join(str(loc) for loc in error["loc"]) for error in exc.errors()]
    logger.warning("Validation error on %s: %s", request.url.path, fields)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": f"Invalid request parameters: {', '.join(fields)}"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
