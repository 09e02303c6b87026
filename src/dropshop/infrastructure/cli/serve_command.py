"""CLI command that runs the HTTP storefront."""

from __future__ import annotations

import dataclasses

import click

from dropshop.infrastructure.bootstrap import server_app
from dropshop.infrastructure.config import ConfigurationError, Settings


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: $HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Port to listen on (default: $PORT or 3000).")
@click.option("--admin-key", default=None, help="Admin secret (default: $ADMIN_KEY).")
@click.option("--initial-stock", default=None, type=click.IntRange(min=0), help="Stock at startup.")
@click.option("--debug", is_flag=True, default=False, help="Run Flask in debug mode.")
def serve(
    host: str | None,
    port: int | None,
    admin_key: str | None,
    initial_stock: int | None,
    debug: bool,
) -> None:
    """Serve the storefront, checkout and admin pages plus the JSON API."""
    overrides = {
        "host": host,
        "port": port,
        "admin_key": admin_key,
        "initial_stock": initial_stock,
    }
    try:
        env_settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    settings = dataclasses.replace(
        env_settings,
        **{name: value for name, value in overrides.items() if value is not None},
    )

    app = server_app(settings)
    click.echo(f"Serving on http://{settings.host}:{settings.port} (stock={settings.initial_stock})")
    app.run(host=settings.host, port=settings.port, debug=debug, threaded=True)
