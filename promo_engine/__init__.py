from promo_engine.catalog import RuleCatalog, default_catalog
from promo_engine.evaluator import DiscountEvaluator, evaluate_discount
from promo_engine.exceptions import (
    DuplicateCodeError,
    InvalidCartItemError,
    InvalidRuleError,
    PromoEngineError,
)
from promo_engine.models import CartItem, DecisionResult, DiscountRule, Outcome, UserContext

__all__ = [
    "CartItem",
    "DecisionResult",
    "DiscountEvaluator",
    "DiscountRule",
    "DuplicateCodeError",
    "InvalidCartItemError",
    "InvalidRuleError",
    "Outcome",
    "PromoEngineError",
    "RuleCatalog",
    "UserContext",
    "default_catalog",
    "evaluate_discount",
]
