"""CLI commands for the database schema."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.context import container
from storefront.infrastructure.persistence.database import init_db


@click.command("init")
def db_init() -> None:
    """Create all tables."""
    init_db(container().engine)
    click.echo("Database initialised.")
