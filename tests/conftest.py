"""Pytest fixtures for the promo engine."""

import pytest

from promo_engine.catalog import RuleCatalog, default_catalog
from promo_engine.evaluator import DiscountEvaluator
from promo_engine.models import CartItem, DiscountRule, UserContext


@pytest.fixture
def catalog() -> RuleCatalog:
    return default_catalog()


@pytest.fixture
def evaluator(catalog) -> DiscountEvaluator:
    return DiscountEvaluator(catalog)


@pytest.fixture
def cart() -> list[CartItem]:
    return [
        CartItem(price=100.0, quantity=2, category="A", name="Item1"),  # $200
        CartItem(price=50.0, quantity=1, category="B", name="Item2"),  # $50
    ]


@pytest.fixture
def user() -> UserContext:
    return UserContext(level=2, history=["WELCOME"], user_id="user123")


@pytest.fixture
def half_catalog() -> RuleCatalog:
    """Two stackable 50% rules with round numbers, for stacking arithmetic."""
    return RuleCatalog(
        [
            DiscountRule("HALF", rate=0.5, min_amount=0.0, max_amount=100.0),
            DiscountRule("HALF_B", rate=0.5, min_amount=0.0, max_amount=100.0, categories={"B"}),
            DiscountRule("QUARTER", rate=0.25, min_amount=0.0, max_amount=100.0),
            DiscountRule("ONCE", rate=0.5, min_amount=0.0, max_amount=100.0, exclusive=True, stackable=False),
        ]
    )
