from __future__ import annotations

from typing import Iterable, List

from promo_engine.models import CartItem, DiscountRule


def line_amount(item: CartItem) -> float:
    return item.line_amount


def cart_total(items: Iterable[CartItem]) -> float:
    return sum((line_amount(item) for item in items), 0.0)


def applicable_items(items: Iterable[CartItem], rule: DiscountRule) -> List[CartItem]:
    return [item for item in items if rule.applies_to(item.category)]


def applicable_total(items: Iterable[CartItem], rule: DiscountRule) -> float:
    """Subtotal of the lines covered by the rule's category filter."""
    return cart_total(applicable_items(items, rule))
