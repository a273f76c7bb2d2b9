"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO, ShippingSpec
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.set_order_status import SetOrderStatusHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import OPERATOR, uow_factory


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Ship to:  {dto.shipping_address_line1}, {dto.shipping_city} "
               f"{dto.shipping_postal_code}, {dto.shipping_country}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_title:<20} {item.quantity:>5} "
            f"{'$' + item.price_at_purchase:>10} {'$' + item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {'$' + dto.total_amount:>20}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="User whose cart is checked out.")
@click.option("--address-line1", default=None, help="Street address.")
@click.option("--address-line2", default=None, help="Apartment, suite, etc. (optional).")
@click.option("--city", default=None, help="City.")
@click.option("--postal-code", default=None, help="Postal code.")
@click.option("--country", default=None, help="Country.")
def order_place(
    user_id: str,
    address_line1: str | None,
    address_line2: str | None,
    city: str | None,
    postal_code: str | None,
    country: str | None,
) -> None:
    """Check out a user's cart into a new order."""
    handler = PlaceOrderHandler(uow_factory())
    shipping = ShippingSpec(
        address_line1=address_line1,
        address_line2=address_line2,
        city=city,
        postal_code=postal_code,
        country=country,
    )

    try:
        result = handler.handle(user_id, shipping)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.order is None:
        click.echo(result.message)
        return
    click.echo("Order placed.")
    _display_order(result.order)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--user", "user_id", default=None, help="Only show the order if it belongs to this user.")
def order_show(order_id: int, user_id: str | None) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow_factory())

    try:
        dto = handler.handle(order_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only list this user's orders.")
def order_list(user_id: str | None) -> None:
    """List orders, most recent first."""
    handler = ListOrdersHandler(uow_factory())
    dtos = handler.for_user(user_id) if user_id else handler.all()

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<16} {'Status':<12} {'Total':>12}")
    click.echo("-" * 49)
    for dto in dtos:
        click.echo(f"{dto.id:<6} {dto.user_id:<16} {dto.status:<12} {'$' + dto.total_amount:>12}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--status", "new_status", required=True, help="PROCESSING, SHIPPED or CANCELLED.")
def order_status(order_id: int, new_status: str) -> None:
    """Change an order's status (cancelling restores stock)."""
    handler = SetOrderStatusHandler(uow_factory())

    try:
        dto = handler.handle(order_id, new_status, actor=OPERATOR)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")
