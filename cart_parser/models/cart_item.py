from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

"""CartItem model: one parsed body row of a cart file."""

__all__ = [
    "CartItem",
]


@dataclass(frozen=True)
class CartItem:
    """A single cart line item.

    Numeric fields are non-negative; the validator enforces this before any
    item is built. Field order is not significant.
    """
    id: str  # 外部 ID ソースで採番
    name: str
    price: float
    quantity: float

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
