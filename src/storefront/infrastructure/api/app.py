"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from storefront.infrastructure.api import orders
from storefront.infrastructure.api.exception_handlers import register_exception_handlers
from storefront.infrastructure.bootstrap import Container, build_container


def create_app(container: Container | None = None) -> FastAPI:
    container = container or build_container()

    app = FastAPI(title="Storefront Orders API")
    app.state.container = container
    register_exception_handlers(app)
    app.include_router(orders.router, prefix=container.settings.API_PREFIX)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
