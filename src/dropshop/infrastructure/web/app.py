"""Flask app factory: the HTTP surface of the shop.

Handlers are stateless; the only state is the injected StockStore.
Every DomainException raised by a handler is turned into a
``{"ok": false, "message": ...}`` body by one error handler.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template_string, request

from dropshop.application.checkout import CheckoutHandler
from dropshop.application.purchase import PurchaseHandler
from dropshop.application.set_stock import SetStockHandler
from dropshop.application.show_stock import ShowStockHandler
from dropshop.domain.exceptions import DomainException, UnauthorizedError
from dropshop.domain.model.checkout import CheckoutSubmission
from dropshop.domain.repository.stock_store import StockStore
from dropshop.domain.service.admin_authorizer import AdminAuthorizer
from dropshop.infrastructure.web import pages

logger = logging.getLogger(__name__)


def _payload() -> dict:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _status_for(exc: DomainException) -> int:
    if isinstance(exc, UnauthorizedError):
        return 401
    return 400


def create_app(stock_store: StockStore, authorizer: AdminAuthorizer) -> Flask:
    app = Flask(__name__)

    show_stock = ShowStockHandler(stock_store)
    purchase = PurchaseHandler(stock_store)
    checkout = CheckoutHandler(stock_store)
    set_stock = SetStockHandler(stock_store, authorizer)

    @app.errorhandler(DomainException)
    def domain_error(exc: DomainException):
        logger.info("Request rejected: %s (%s)", exc.kind, exc.message)
        return jsonify({"ok": False, "message": exc.message}), _status_for(exc)

    # --- JSON API -------------------------------------------------------------

    @app.get("/api/stock")
    def api_stock():
        return jsonify({"stock": show_stock.handle().stock})

    @app.post("/api/purchase")
    def api_purchase():
        result = purchase.handle(_payload().get("qty"))
        return jsonify({"ok": True, "stock": result.stock})

    @app.post("/api/checkout")
    def api_checkout():
        submission = CheckoutSubmission.from_mapping(_payload())
        result = checkout.handle(submission)
        return jsonify({"ok": True, "message": result.message, "stock": result.stock})

    @app.post("/api/admin/set-stock")
    def api_set_stock():
        data = _payload()
        result = set_stock.handle(data.get("key"), data.get("stock"))
        return jsonify({"ok": True, "stock": result.stock})

    # --- HTML pages -----------------------------------------------------------

    @app.get("/")
    def storefront():
        return render_template_string(
            pages.STOREFRONT,
            stock=show_stock.handle().stock,
            poll_ms=pages.STOCK_POLL_INTERVAL_MS,
        )

    @app.get("/checkout")
    def checkout_page():
        return render_template_string(pages.CHECKOUT)

    @app.get("/admin")
    def admin_page():
        key = request.args.get("key", "")
        if not authorizer.is_authorized(key):
            return render_template_string(pages.UNAUTHORIZED), 401
        return render_template_string(
            pages.ADMIN, stock=show_stock.handle().stock, admin_key=key
        )

    return app
