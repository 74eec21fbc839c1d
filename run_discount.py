from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from promo_engine.catalog import default_catalog
from promo_engine.evaluator import DiscountEvaluator
from promo_engine.models import CartItem, UserContext


def seed() -> List[CartItem]:
    return [
        CartItem(price=100.0, quantity=2, category="A", name="Item1"),
        CartItem(price=50.0, quantity=1, category="B", name="Item2"),
    ]


def parse_item(raw: str) -> CartItem:
    """NAME:PRICE:QTY:CATEGORY"""
    try:
        name, price, qty, category = raw.split(":")
        return CartItem(price=float(price), quantity=int(qty), category=category, name=name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"bad item {raw!r}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Evaluate one promo code against a cart and print the decision.")
    p.add_argument("--code", type=str, default="SAVE20")
    p.add_argument("--level", type=int, default=2)
    p.add_argument("--history", type=str, nargs="*", default=["WELCOME"])
    p.add_argument(
        "--item",
        type=parse_item,
        action="append",
        dest="items",
        help="Cart line NAME:PRICE:QTY:CATEGORY, repeatable (default: demo cart)",
    )
    p.add_argument(
        "--keep-stacked",
        action="store_true",
        help="Keep earlier stacked discounts in the total when nothing more can be stacked",
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    args = build_parser().parse_args(argv)
    cart = args.items or seed()
    user = UserContext(level=args.level, history=args.history)

    evaluator = DiscountEvaluator(default_catalog(), keep_stacked_on_noop=args.keep_stacked)
    result = evaluator.evaluate(cart, args.code, user)

    print("\n=== RESULT ===")
    print("cart:", cart)
    print("user:", user)
    print("decision:", result.as_dict())


if __name__ == "__main__":
    main()
