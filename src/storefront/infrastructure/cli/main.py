import click
import uvicorn

from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.cli.db_commands import db_init
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import cart_add, product_add, product_list
from storefront.infrastructure.logging_config import configure_logging
from storefront.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """Storefront: order placement and inventory."""
    configure_logging(get_settings().LOG_LEVEL)


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage carts."""


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(create_app(), host=host or settings.HOST, port=port or settings.PORT)


# Register subcommands
db.add_command(db_init)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
cart.add_command(cart_add)
