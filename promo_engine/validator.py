from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from promo_engine.cart import applicable_total, cart_total
from promo_engine.catalog import RuleCatalog
from promo_engine.models import CartItem, DecisionResult, DiscountRule, Outcome, UserContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidatedRequest:
    """A code that passed every eligibility check, with the totals already computed."""

    rule: DiscountRule
    applicable_total: float
    cart_total: float


class EligibilityValidator:
    """
    Checks run in a fixed order and the first failing one decides:

    1. code exists in the catalog
    2. user level reaches the rule's floor
    3. an exclusive code is not in the user's history
    4. applicable subtotal reaches the minimum
    5. applicable subtotal does not exceed the maximum

    Every failure reports the whole cart total, not the filtered subtotal.
    """

    def __init__(self, catalog: RuleCatalog):
        self.catalog = catalog

    def _reject(self, code: str, outcome: Outcome, total: float) -> DecisionResult:
        logger.debug("[code=%s] rejected: %s", code, outcome.value)
        return DecisionResult.failure(outcome, total, code=code)

    def validate(
        self, cart: Sequence[CartItem], code: str, user: UserContext
    ) -> Union[DecisionResult, ValidatedRequest]:
        total = cart_total(cart)

        rule = self.catalog.lookup(code)
        if rule is None:
            return self._reject(code, Outcome.INVALID_CODE, total)

        if user.level < rule.required_level:
            return self._reject(code, Outcome.INSUFFICIENT_LEVEL, total)

        # stackable codes may repeat; the calculator neutralizes the repeat
        if not rule.stackable and user.has_used(code):
            return self._reject(code, Outcome.ALREADY_USED, total)

        applicable = applicable_total(cart, rule)
        if applicable < rule.min_amount:
            return self._reject(code, Outcome.MINIMUM_NOT_MET, total)
        if applicable > rule.max_amount:
            return self._reject(code, Outcome.MAXIMUM_EXCEEDED, total)

        return ValidatedRequest(rule=rule, applicable_total=applicable, cart_total=total)
