from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from ..models.cart_item import CartItem

CENT = Decimal("0.01")


def calc_total(items: Iterable[CartItem]) -> float:
    """Sum ``price * quantity`` over items. Unrounded; 0 for no items."""
    return sum((item.price * item.quantity for item in items), 0.0)


def round_total(total: float) -> float:
    """Round to 2 decimals, ties away from zero.

    ``Decimal(total)`` keeps the exact binary value, so 0.125 rounds to 0.13
    while 1.005 (stored as 1.00499...) rounds to 1.0.
    """
    return float(Decimal(total).quantize(CENT, rounding=ROUND_HALF_UP))
