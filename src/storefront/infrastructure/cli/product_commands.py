"""CLI commands for the catalog and carts (seeding only)."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import uow_factory


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 59.99).")
@click.option("--stock", "stock_quantity", default=0, show_default=True, type=int, help="Units in stock.")
def product_add(title: str, price: str, stock_quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(uow_factory())

    try:
        product = handler.handle(title=title, price=price, stock_quantity=stock_quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' added at {product.price} ({product.stock_quantity} in stock)")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    with uow_factory()() as uow:
        products = uow.products.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.id:<6} {p.title:<24} {str(p.price):>10} {p.stock_quantity:>7}")


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(user_id: str, product_id: int, quantity: int) -> None:
    """Add a product to a user's cart."""
    handler = AddToCartHandler(uow_factory())

    try:
        cart = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart for '{user_id}' now has {len(cart.items)} line item(s).")
