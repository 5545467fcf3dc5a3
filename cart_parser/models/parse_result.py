from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .cart_item import CartItem

if TYPE_CHECKING:
    import pandas as pd

"""ParseResult model: items of a successfully parsed cart plus its total."""

__all__ = [
    "ParseResult",
]


@dataclass(frozen=True)
class ParseResult:
    """Successful parse of a cart file.

    Only produced when validation returned no errors.
    """
    items: tuple[CartItem, ...]  # ファイルの行順
    total: float  # 小数点以下2桁に丸め済

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view of the items with a computed ``subtotal`` column."""
        import pandas as pd

        columns = ["id", "name", "price", "quantity"]
        df = pd.DataFrame([item.to_dict() for item in self.items], columns=columns)
        df["subtotal"] = df["price"] * df["quantity"]
        return df
