"""Domain service: Checkout Validator.

Format and checksum checks on a submitted card form.  Rules run in a
fixed order and the first failure wins; nothing is persisted.
"""

from __future__ import annotations

import re

from dropshop.domain.exceptions import (
    InvalidCardError,
    InvalidCvcError,
    InvalidExpiryError,
    MissingFieldsError,
)
from dropshop.domain.model.checkout import CheckoutSubmission, ValidatedSubmission
from dropshop.domain.model.value_objects import (
    MaskedCard,
    Quantity,
    digits_only,
    luhn_check,
)

# MM/YY or MM/YYYY, whitespace-tolerant around the slash
EXPIRY_PATTERN = re.compile(r"\s*\d{1,2}\s*/\s*\d{2,4}\s*", re.ASCII)

CARD_LENGTH = (12, 19)
CVC_LENGTH = (3, 4)


def _present(value: object) -> bool:
    return value is not None and str(value) != ""


class CheckoutValidator:

    def validate(self, submission: CheckoutSubmission) -> ValidatedSubmission:
        """Validate a submission, returning only non-sensitive data.

        Order:
          1. all of name, card number, expiry and CVC present
          2. card is 12-19 digits and passes Luhn
          3. CVC is 3-4 digits
          4. expiry looks like MM/YY or MM/YYYY
        """
        required = (
            submission.name,
            submission.card_number,
            submission.expiry,
            submission.cvc,
        )
        if not all(_present(value) for value in required):
            raise MissingFieldsError()

        card_digits = digits_only(submission.card_number)
        low, high = CARD_LENGTH
        if not low <= len(card_digits) <= high or not luhn_check(card_digits):
            raise InvalidCardError()

        low, high = CVC_LENGTH
        if not low <= len(digits_only(submission.cvc)) <= high:
            raise InvalidCvcError()

        if EXPIRY_PATTERN.fullmatch(str(submission.expiry)) is None:
            raise InvalidExpiryError()

        return ValidatedSubmission(
            name=str(submission.name),
            masked_card=MaskedCard.of(card_digits),
            expiry=str(submission.expiry).strip(),
            quantity=Quantity.parse(submission.quantity),
        )
