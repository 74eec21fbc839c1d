from __future__ import annotations

import logging
from typing import Optional, Sequence

from promo_engine.calculator import DiscountCalculator
from promo_engine.catalog import RuleCatalog, default_catalog
from promo_engine.models import CartItem, DecisionResult, UserContext
from promo_engine.validator import EligibilityValidator

logger = logging.getLogger(__name__)


class DiscountEvaluator:
    """
    Validates a code against the cart and user, then computes the discount.

    Holds no per-call state: the same inputs always give the same result.
    Recording the code in the user's history after a success is up to the
    caller.
    """

    def __init__(self, catalog: Optional[RuleCatalog] = None, keep_stacked_on_noop: bool = False):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.validator = EligibilityValidator(self.catalog)
        self.calculator = DiscountCalculator(self.catalog, keep_stacked_on_noop=keep_stacked_on_noop)

    def evaluate(self, cart: Sequence[CartItem], code: str, user: UserContext) -> DecisionResult:
        logger.info(f"[code={code}] EVALUATE level={user.level} history={list(user.history)} items={len(cart)}")

        checked = self.validator.validate(cart, code, user)
        if isinstance(checked, DecisionResult):
            result = checked
        else:
            result = self.calculator.calculate(cart, user, checked)

        logger.info(
            f"[code={code}] {result.message}: amount={result.amount} final={result.final_total}"
        )
        return result


def evaluate_discount(
    cart: Sequence[CartItem],
    code: str,
    user: UserContext,
    catalog: Optional[RuleCatalog] = None,
) -> DecisionResult:
    return DiscountEvaluator(catalog).evaluate(cart, code, user)
