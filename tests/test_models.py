"""Tests for value objects and their construction-time checks."""

import dataclasses

import pytest

from promo_engine.exceptions import InvalidCartItemError, InvalidRuleError, PromoEngineError
from promo_engine.models import CartItem, DecisionResult, DiscountRule, Outcome, UserContext


def test_outcome_messages_are_fixed():
    assert [o.value for o in Outcome] == [
        "Invalid code",
        "Insufficient level",
        "Already used",
        "Minimum not met",
        "Maximum exceeded",
        "No additional discount",
        "Applied",
        "Stacked applied",
    ]
    assert {o for o in Outcome if o.success} == {Outcome.APPLIED, Outcome.STACKED_APPLIED}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rate": -0.1},
        {"rate": 1.5},
        {"min_amount": -1.0},
        {"min_amount": 200.0, "max_amount": 100.0},
        {"required_level": -1},
        {"exclusive": True, "stackable": True},
        {"exclusive": False, "stackable": False},
    ],
)
def test_malformed_rule_is_rejected(kwargs):
    base = {"rate": 0.1, "min_amount": 0.0, "max_amount": 100.0}
    base.update(kwargs)
    with pytest.raises(InvalidRuleError):
        DiscountRule("BAD", **base)


def test_rule_errors_are_value_errors():
    with pytest.raises(ValueError):
        DiscountRule("", rate=0.1, min_amount=0.0, max_amount=1.0)
    assert issubclass(InvalidRuleError, PromoEngineError)


def test_rule_categories_are_frozen():
    rule = DiscountRule("CAT", rate=0.1, min_amount=0.0, max_amount=10.0, categories=["A", "B"])
    assert rule.categories == frozenset({"A", "B"})
    assert rule.applies_to("A")
    assert not rule.applies_to("C")


def test_rule_without_categories_covers_everything():
    rule = DiscountRule("ALL", rate=0.1, min_amount=0.0, max_amount=10.0)
    assert rule.applies_to("anything")


def test_rule_is_immutable():
    rule = DiscountRule("ALL", rate=0.1, min_amount=0.0, max_amount=10.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.rate = 0.9


@pytest.mark.parametrize("price,quantity", [(-1.0, 1), (1.0, -1)])
def test_negative_cart_item_is_rejected(price, quantity):
    with pytest.raises(InvalidCartItemError):
        CartItem(price=price, quantity=quantity, category="A")


def test_cart_item_line_amount():
    assert CartItem(price=12.5, quantity=4, category="A").line_amount == 50.0
    assert CartItem(price=12.5, quantity=0, category="A").line_amount == 0.0


def test_user_history_is_frozen_to_tuple():
    history = ["SAVE10", "SAVE10", "NOPE"]
    user = UserContext(level=1, history=history)
    history.append("VIP50")

    assert user.history == ("SAVE10", "SAVE10", "NOPE")
    assert user.has_used("SAVE10")
    assert not user.has_used("VIP50")


def test_failure_result_shape():
    result = DecisionResult.failure(Outcome.MINIMUM_NOT_MET, 42.0, code="SAVE20")
    assert result.success is False
    assert result.amount == 0.0
    assert result.final_total == 42.0
    assert result.as_dict() == {"success": False, "message": "Minimum not met", "amount": 0.0, "final": 42.0}
