from __future__ import annotations

from collections.abc import Callable

from ..models.cart_item import CartItem
from ..models.schema import CART_SCHEMA, CartSchema

"""Line splitting and row -> CartItem conversion.

``parse_line`` assumes its input already passed validation; it does not
re-check cell counts or types.
"""

BOM = "\ufeff"

__all__ = [
    "split_lines",
    "split_cells",
    "parse_line",
]


def split_lines(contents: str) -> list[str]:
    """Split file contents on newline, dropping empty lines.

    Whitespace-only lines are kept; they are rows like any other. A leading
    byte-order mark (Excel CSV export) is dropped.
    """
    contents = contents.removeprefix(BOM)
    return [line for line in contents.split("\n") if line]


def split_cells(line: str) -> list[str]:
    """Split a CSV line on commas and trim each cell (no quoting support)."""
    return [cell.strip() for cell in line.split(",")]


def parse_line(
    csv_line: str,
    id_factory: Callable[[], str],
    schema: CartSchema = CART_SCHEMA,
) -> CartItem:
    """Convert a validated CSV line into a CartItem.

    Each cell is coerced by its column's type and stored under the column
    key; a fresh identifier from ``id_factory`` becomes the item ``id``.

    Raises:
        ValueError: If a numeric cell cannot be coerced (input was not validated)
    """
    cells = split_cells(csv_line)
    values = {column.key: column.coerce(cell) for column, cell in zip(schema, cells)}
    return CartItem(id=id_factory(), **values)
