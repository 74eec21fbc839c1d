from __future__ import annotations


class PromoEngineError(Exception):
    pass


class InvalidRuleError(PromoEngineError, ValueError):
    """Discount rule definition is malformed."""


class InvalidCartItemError(PromoEngineError, ValueError):
    """Cart item has a negative price or quantity."""


class DuplicateCodeError(PromoEngineError, ValueError):
    pass
