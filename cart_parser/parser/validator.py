from __future__ import annotations

import math

from ..models.schema import CART_SCHEMA, CartSchema, ColumnType, to_number
from ..models.validation_error import ErrorKind, ValidationError
from .line_parser import split_cells, split_lines

"""Schema-driven validator for cart CSV contents.

Checks run in a fixed order and errors are returned in discovery order:
1. Header labels against the schema column names (row 0)
2. Body row length (ROW error, cell checks skipped for that row)
3. Per-cell type rules in column order

The validator never raises; an empty list means the contents are valid.
"""

__all__ = [
    "validate",
    "validate_header",
    "validate_row",
]


def validate_header(header_line: str | None, schema: CartSchema = CART_SCHEMA) -> list[ValidationError]:
    """Compare each header token with the expected column name."""
    headers = split_cells(header_line) if header_line is not None else []
    errors: list[ValidationError] = []
    for i, column in enumerate(schema):
        received = headers[i] if i < len(headers) else None
        if received != column.name:
            errors.append(ValidationError(
                type=ErrorKind.HEADER,
                row=0,
                column=i,
                message=f'Expected header to be named "{column.name}" but received {received}.',
            ))
    return errors


def validate_row(line: str, row: int, schema: CartSchema = CART_SCHEMA) -> list[ValidationError]:
    """Validate a single body row (``row`` is 1-based)."""
    cells = split_cells(line)
    if len(cells) < len(schema):
        # 短い行はセル検証を行わない
        return [ValidationError(
            type=ErrorKind.ROW,
            row=row,
            column=-1,
            message=f"Expected row to have {len(schema)} cells but received {len(cells)}.",
        )]

    errors: list[ValidationError] = []
    for j, column in enumerate(schema):
        cell = cells[j]
        if column.type is ColumnType.STRING:
            if not cell:
                errors.append(ValidationError(
                    type=ErrorKind.CELL,
                    row=row,
                    column=j,
                    message=f'Expected cell to be a nonempty string but received "{cell}".',
                ))
        elif column.type is ColumnType.POSITIVE_NUMBER:
            value = to_number(cell)
            if math.isnan(value) or value < 0:
                errors.append(ValidationError(
                    type=ErrorKind.CELL,
                    row=row,
                    column=j,
                    message=f'Expected cell to be a positive number but received "{cell}".',
                ))
    return errors


def validate(contents: str, schema: CartSchema = CART_SCHEMA) -> list[ValidationError]:
    """Validate raw cart file contents against the schema.

    Args:
        contents: File contents, lines separated by newline
        schema: Column schema (defaults to the cart schema)

    Returns:
        Validation errors in discovery order. Empty list on success.
    """
    lines = split_lines(contents)
    header_line = lines[0] if lines else None

    errors = validate_header(header_line, schema)
    for row, line in enumerate(lines[1:], start=1):
        errors.extend(validate_row(line, row, schema))
    return errors
