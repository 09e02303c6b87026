"""CLI commands for the local shop.

Counterpart of the browser-only storefront: the stock level lives in a
local key-value file and every action reads and writes it directly.
"""

from __future__ import annotations

from pathlib import Path

import click

from dropshop.application.adjust_local_stock import AdjustLocalStockHandler
from dropshop.application.purchase import PurchaseHandler
from dropshop.application.reset_stock import ResetStockHandler
from dropshop.application.show_stock import ShowStockHandler
from dropshop.domain.exceptions import DomainException
from dropshop.infrastructure.bootstrap import local_stock_store
from dropshop.infrastructure.config import ConfigurationError, Settings


def _store(file_path: Path | None):
    try:
        settings = Settings.local_from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    return local_stock_store(settings, file_path)


@click.command("show")
@click.pass_obj
def shop_show(file_path: Path | None) -> None:
    """Show the stock counter."""
    dto = ShowStockHandler(_store(file_path)).handle()
    status = "in stock" if dto.stock > 0 else "out of stock"
    click.echo(f"Stock: {dto.stock} ({status})")


@click.command("buy")
@click.option("--qty", default="1", help="Units to buy (default 1).")
@click.pass_obj
def shop_buy(file_path: Path | None, qty: str) -> None:
    """Simulate a purchase."""
    handler = PurchaseHandler(_store(file_path))

    try:
        result = handler.handle(qty)
    except DomainException as exc:
        raise click.ClickException(f"{exc.detail}: purchase failed.")

    plural = "s" if result.quantity > 1 else ""
    click.echo(f"Success! Purchased {result.quantity} unit{plural}.")
    click.echo(f"Stock: {result.stock}")


@click.command("set")
@click.option("--stock", required=True, help="New stock level (non-negative number).")
@click.pass_obj
def shop_set(file_path: Path | None, stock: str) -> None:
    """Set the stock level."""
    handler = AdjustLocalStockHandler(_store(file_path))

    try:
        dto = handler.handle(stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock set to {dto.stock}.")


@click.command("reset")
@click.pass_obj
def shop_reset(file_path: Path | None) -> None:
    """Forget the stored level and go back to the default."""
    dto = ResetStockHandler(_store(file_path)).handle()
    click.echo(f"Reset to default stock. Stock: {dto.stock}")
