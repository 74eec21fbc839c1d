from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from promo_engine.exceptions import InvalidCartItemError, InvalidRuleError


class Outcome(Enum):
    INVALID_CODE = "Invalid code"
    INSUFFICIENT_LEVEL = "Insufficient level"
    ALREADY_USED = "Already used"
    MINIMUM_NOT_MET = "Minimum not met"
    MAXIMUM_EXCEEDED = "Maximum exceeded"
    NO_ADDITIONAL_DISCOUNT = "No additional discount"
    APPLIED = "Applied"
    STACKED_APPLIED = "Stacked applied"

    @property
    def success(self) -> bool:
        return self in (Outcome.APPLIED, Outcome.STACKED_APPLIED)


@dataclass(frozen=True, slots=True)
class DiscountRule:
    """
    Static definition of one promo code.

    An empty ``categories`` set means the rule covers the whole cart.
    A rule is either exclusive or stackable, never both.
    """

    code: str
    rate: float
    min_amount: float
    max_amount: float
    categories: FrozenSet[str] = frozenset()
    exclusive: bool = False
    stackable: bool = True
    required_level: int = 0

    def __post_init__(self) -> None:
        if not self.code:
            raise InvalidRuleError("rule code must be non-empty")
        if not 0.0 <= self.rate <= 1.0:
            raise InvalidRuleError(f"Rule {self.code}: rate must be within [0, 1], got {self.rate}")
        if self.min_amount < 0 or self.max_amount < 0:
            raise InvalidRuleError(f"Rule {self.code}: min/max amounts must be >= 0")
        if self.min_amount > self.max_amount:
            raise InvalidRuleError(
                f"Rule {self.code}: min_amount={self.min_amount} exceeds max_amount={self.max_amount}"
            )
        if self.required_level < 0:
            raise InvalidRuleError(f"Rule {self.code}: required_level must be >= 0")
        if self.exclusive == self.stackable:
            raise InvalidRuleError(f"Rule {self.code}: must be either exclusive or stackable")
        # allow callers to pass any iterable of labels
        object.__setattr__(self, "categories", frozenset(self.categories))

    def applies_to(self, category: str) -> bool:
        return not self.categories or category in self.categories


@dataclass(frozen=True, slots=True)
class CartItem:
    price: float
    quantity: int
    category: str
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise InvalidCartItemError(f"price must be >= 0, got {self.price}")
        if self.quantity < 0:
            raise InvalidCartItemError(f"quantity must be >= 0, got {self.quantity}")

    @property
    def line_amount(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True, slots=True)
class UserContext:
    """
    What the engine knows about the customer.

    ``history`` keeps codes in the order they were used. Unknown codes and
    repeats are allowed.
    """

    level: int
    history: Tuple[str, ...] = ()
    user_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "history", tuple(self.history))

    def has_used(self, code: str) -> bool:
        return code in self.history


@dataclass(frozen=True, slots=True)
class DecisionResult:
    success: bool
    message: str
    amount: float
    final_total: float
    outcome: Outcome
    code: Optional[str] = None

    @classmethod
    def failure(cls, outcome: Outcome, cart_total: float, code: Optional[str] = None) -> "DecisionResult":
        return cls(
            success=False,
            message=outcome.value,
            amount=0.0,
            final_total=cart_total,
            outcome=outcome,
            code=code,
        )

    @classmethod
    def applied(
        cls, outcome: Outcome, amount: float, final_total: float, code: Optional[str] = None
    ) -> "DecisionResult":
        return cls(
            success=outcome.success,
            message=outcome.value,
            amount=amount,
            final_total=final_total,
            outcome=outcome,
            code=code,
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "message": self.message,
            "amount": self.amount,
            "final": self.final_total,
        }
