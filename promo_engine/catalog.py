from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional

from promo_engine.exceptions import DuplicateCodeError
from promo_engine.models import DiscountRule

logger = logging.getLogger(__name__)


class RuleCatalog:
    """
    Read-only table of discount rules keyed by code.

    Built once and never mutated afterwards, so one instance can be shared
    between threads.
    """

    def __init__(self, rules: Iterable[DiscountRule] = ()) -> None:
        table = {}
        for rule in rules:
            if rule.code in table:
                raise DuplicateCodeError(f"Rule {rule.code} defined twice")
            table[rule.code] = rule
        self._rules: Mapping[str, DiscountRule] = MappingProxyType(table)
        logger.debug("catalog loaded: %s", ", ".join(self._rules) or "<empty>")

    def lookup(self, code: str) -> Optional[DiscountRule]:
        return self._rules.get(code)

    def codes(self) -> List[str]:
        return list(self._rules)

    def __contains__(self, code: object) -> bool:
        return code in self._rules

    def __iter__(self) -> Iterator[DiscountRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleCatalog({self.codes()!r})"


def default_catalog() -> RuleCatalog:
    return RuleCatalog(
        [
            DiscountRule("SAVE10", rate=0.10, min_amount=50.0, max_amount=999999.0, exclusive=False, stackable=True),
            DiscountRule(
                "SAVE20",
                rate=0.20,
                min_amount=100.0,
                max_amount=500.0,
                categories=frozenset({"A"}),
                exclusive=True,
                stackable=False,
                required_level=1,
            ),
            DiscountRule("WELCOME", rate=0.15, min_amount=0.0, max_amount=250.0, exclusive=False, stackable=True),
            DiscountRule(
                "VIP50",
                rate=0.50,
                min_amount=200.0,
                max_amount=999999.0,
                exclusive=True,
                stackable=False,
                required_level=3,
            ),
        ]
    )
