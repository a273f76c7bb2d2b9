"""Smoke tests for the ``storefront`` command line."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli import context
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.settings import get_settings


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    get_settings.cache_clear()
    context.container.cache_clear()
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args))

    assert _run("db", "init").exit_code == 0
    yield _run

    context.container().engine.dispose()
    context.container.cache_clear()
    get_settings.cache_clear()


SHIP = ["--address-line1", "1 Main St", "--city", "Springfield", "--postal-code", "12345", "--country", "US"]


def test_place_and_cancel(run):
    assert "Product #1 'Lamp' added at $24.00 (5 in stock)" in run(
        "product", "add", "--title", "Lamp", "--price", "24.00", "--stock", "5"
    ).output
    assert run("cart", "add", "--user", "alice", "--product-id", "1", "--quantity", "2").exit_code == 0

    placed = run("order", "place", "--user", "alice", *SHIP)
    assert placed.exit_code == 0, placed.output
    assert "Order placed." in placed.output
    assert "$48.00" in placed.output

    cancelled = run("order", "status", "--id", "1", "--status", "cancelled")
    assert cancelled.exit_code == 0, cancelled.output
    assert "Order #1 is now CANCELLED." in cancelled.output

    listing = run("product", "list")
    assert "Lamp" in listing.output
    assert any(line.startswith("1 ") and line.rstrip().endswith(" 5") for line in listing.output.splitlines())


def test_empty_cart_message(run):
    result = run("order", "place", "--user", "bob", *SHIP)

    assert result.exit_code == 0
    assert "Your cart is empty." in result.output


def test_domain_errors_exit_non_zero(run):
    run("product", "add", "--title", "Lamp", "--price", "24.00", "--stock", "1")
    run("cart", "add", "--user", "alice", "--product-id", "1", "--quantity", "3")

    result = run("order", "place", "--user", "alice", *SHIP)

    assert result.exit_code == 1
    assert 'Insufficient stock for "Lamp". Available: 1, Requested: 3.' in result.output


def test_unknown_order(run):
    result = run("order", "show", "--id", "42")

    assert result.exit_code == 1
    assert "Order #42 not found" in result.output


def test_sub_cent_price_rejected(run):
    result = run("product", "add", "--title", "Lamp", "--price", "19.999", "--stock", "1")

    assert result.exit_code == 1
    assert "more than 2 decimal places" in result.output
    assert "No products found." in run("product", "list").output
