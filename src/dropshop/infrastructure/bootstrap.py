"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from dropshop.domain.service.admin_authorizer import SharedSecretAuthorizer
from dropshop.infrastructure.config import Settings
from dropshop.infrastructure.persistence.json_stock_store import JsonStockStore
from dropshop.infrastructure.persistence.memory_stock_store import InMemoryStockStore
from dropshop.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


def local_stock_store(settings: Settings, file_path: Path | None = None) -> JsonStockStore:
    return JsonStockStore(file_path or settings.stock_file, default=settings.initial_stock)


def server_app(settings: Settings) -> Flask:
    if settings.uses_fallback_key:
        logger.warning(
            "ADMIN_KEY is not set; using the built-in fallback key. "
            "Anyone who knows it can change the stock level."
        )
    return create_app(
        stock_store=InMemoryStockStore(default=settings.initial_stock),
        authorizer=SharedSecretAuthorizer(settings.admin_key),
    )
