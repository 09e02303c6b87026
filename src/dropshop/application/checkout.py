"""Application service: Checkout use case.

Orchestrates the stock check, the card-form validation and the stock
decrement.  Steps:

1. Check that the requested quantity is available (no mutation).
2. Validate the card form; on failure stock is left unchanged.
3. Decrement stock and log the masked submission.

The raw card number and CVC never leave step 2.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dropshop.application.dto import CheckoutResultDTO
from dropshop.domain.model.checkout import CheckoutSubmission
from dropshop.domain.model.stock import StockLevel
from dropshop.domain.model.value_objects import Quantity
from dropshop.domain.repository.stock_store import StockStore
from dropshop.domain.service.checkout_validator import CheckoutValidator

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Checkout simulated (no real payment). Use test cards only."


class CheckoutHandler:

    def __init__(
        self,
        stock_store: StockStore,
        validator: CheckoutValidator | None = None,
    ) -> None:
        self._stock_store = stock_store
        self._validator = validator or CheckoutValidator()

    def handle(self, submission: CheckoutSubmission) -> CheckoutResultDTO:
        quantity = Quantity.parse(submission.quantity)
        StockLevel(self._stock_store.get()).ensure_available(quantity.value)

        validated = self._validator.validate(submission)
        remaining = self._stock_store.decrement(validated.quantity.value)

        logger.info(
            "Simulated checkout name=%s card=%s expiry=%s qty=%d time=%s",
            validated.name,
            validated.masked_card,
            validated.expiry,
            validated.quantity.value,
            datetime.now(timezone.utc).isoformat(),
        )

        return CheckoutResultDTO(
            message=SUCCESS_MESSAGE,
            quantity=validated.quantity.value,
            masked_card=str(validated.masked_card),
            stock=remaining,
        )
