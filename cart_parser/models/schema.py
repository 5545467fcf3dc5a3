from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

"""Column schema for cart CSV files.

The schema is plain data: an ordered table of columns, each with the header
label expected in the file, the key used on the parsed item and the type rule
applied to its cells. Validator and line parser both walk this table, so the
column order lives in exactly one place.
"""

__all__ = [
    "ColumnType",
    "Column",
    "CartSchema",
    "CART_SCHEMA",
    "to_number",
]

# 標準的な10進表記のみ (16進・アンダースコア区切りは拒否)
_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


class ColumnType(Enum):
    """Cell type rule for a schema column.

    - STRING: nonempty text after trimming
    - POSITIVE_NUMBER: decimal number >= 0
    """
    STRING = "string"
    POSITIVE_NUMBER = "numberPositive"


def to_number(cell: str) -> float:
    """Coerce a trimmed cell to a number.

    An empty cell coerces to 0.0. Anything that is not standard decimal
    notation yields NaN instead of raising, so callers can test the result.
    """
    if cell == "":
        return 0.0
    if not _DECIMAL_RE.match(cell):
        return math.nan
    return float(cell)


@dataclass(frozen=True)
class Column:
    """A single expected column: header label, item key and cell type."""
    name: str  # ヘッダ行に期待するラベル
    key: str  # CartItem のフィールド名
    type: ColumnType

    def coerce(self, cell: str) -> str | float:
        """Convert an already validated cell to the column's Python type."""
        if self.type is ColumnType.POSITIVE_NUMBER:
            value = to_number(cell)
            if math.isnan(value):
                raise ValueError(f"column '{self.key}' expects a number, got {cell!r}")
            return value
        return cell


@dataclass(frozen=True)
class CartSchema:
    """Ordered, immutable sequence of columns."""
    columns: tuple[Column, ...]

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.columns]

    @property
    def keys(self) -> list[str]:
        return [c.key for c in self.columns]


CART_SCHEMA = CartSchema(
    columns=(
        Column(name="Product name", key="name", type=ColumnType.STRING),
        Column(name="Price", key="price", type=ColumnType.POSITIVE_NUMBER),
        Column(name="Quantity", key="quantity", type=ColumnType.POSITIVE_NUMBER),
    )
)
