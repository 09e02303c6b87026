from __future__ import annotations

import logging
from pathlib import Path

import click

from dropshop.infrastructure.cli.serve_command import serve
from dropshop.infrastructure.cli.shop_commands import shop_buy, shop_reset, shop_set, shop_show


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """dropshop: single-item test storefront for sniper bots"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Key-value file holding the stock level (default: $DROPSHOP_STOCK_FILE).",
)
@click.pass_context
def shop(ctx: click.Context, file_path: Path | None) -> None:
    """Local shop: stock kept in a file, no server involved."""
    ctx.obj = file_path


# Register subcommands
cli.add_command(serve)
shop.add_command(shop_buy)
shop.add_command(shop_reset)
shop.add_command(shop_set)
shop.add_command(shop_show)
