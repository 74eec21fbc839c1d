from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from promo_engine.cart import applicable_total
from promo_engine.catalog import RuleCatalog
from promo_engine.models import CartItem, DecisionResult, DiscountRule, Outcome, UserContext
from promo_engine.validator import ValidatedRequest

logger = logging.getLogger(__name__)


class DiscountCalculator:
    """
    Turns a validated request into a discount.

    Exclusive rules take ``rate`` of their applicable subtotal, capped at
    ``max_amount``. Stackable rules first recompute what every earlier
    stackable code in the user's history takes off the *current* cart, then
    apply their own rate to what is left, under a cap reduced by that amount.

    ``keep_stacked_on_noop`` controls the "No additional discount" branch.
    By default the result reports the full cart total, dropping the earlier
    stacked discounts from ``final_total``. With the flag set, the earlier
    discounts stay subtracted.
    """

    def __init__(self, catalog: RuleCatalog, keep_stacked_on_noop: bool = False):
        self.catalog = catalog
        self.keep_stacked_on_noop = keep_stacked_on_noop

    def prior_rules(self, code: str, history: Iterable[str]) -> List[DiscountRule]:
        """One entry per history item: repeats count every time, unknown and exclusive codes are skipped."""
        rules: List[DiscountRule] = []
        for prior_code in history:
            if prior_code == code:
                continue
            rule = self.catalog.lookup(prior_code)
            if rule is not None and rule.stackable:
                rules.append(rule)
        return rules

    def stacked_discount(self, cart: Sequence[CartItem], code: str, history: Iterable[str]) -> float:
        return sum(
            (applicable_total(cart, rule) * rule.rate for rule in self.prior_rules(code, history)),
            0.0,
        )

    def exclusive(self, request: ValidatedRequest) -> DecisionResult:
        rule = request.rule
        amount = min(request.applicable_total * rule.rate, rule.max_amount)
        return DecisionResult.applied(
            Outcome.APPLIED, amount, request.cart_total - amount, code=rule.code
        )

    def stackable(
        self, cart: Sequence[CartItem], user: UserContext, request: ValidatedRequest
    ) -> DecisionResult:
        rule = request.rule
        stacked = self.stacked_discount(cart, rule.code, user.history)

        new_discount = max(0.0, request.applicable_total - stacked) * rule.rate
        remaining_cap = max(0.0, rule.max_amount - stacked)
        amount = min(new_discount, remaining_cap)
        logger.debug(
            "[code=%s] stacked=%s new=%s cap=%s -> %s",
            rule.code, stacked, new_discount, remaining_cap, amount,
        )

        if amount <= 0.0:
            final = request.cart_total - stacked if self.keep_stacked_on_noop else request.cart_total
            return DecisionResult.failure(Outcome.NO_ADDITIONAL_DISCOUNT, final, code=rule.code)

        return DecisionResult.applied(
            Outcome.STACKED_APPLIED, amount, request.cart_total - stacked - amount, code=rule.code
        )

    def calculate(
        self, cart: Sequence[CartItem], user: UserContext, request: ValidatedRequest
    ) -> DecisionResult:
        if request.rule.exclusive:
            return self.exclusive(request)
        return self.stackable(cart, user, request)
