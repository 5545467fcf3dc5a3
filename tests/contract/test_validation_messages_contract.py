from __future__ import annotations

import pytest

from cart_parser.models.schema import CART_SCHEMA
from cart_parser.models.validation_error import ErrorKind
from cart_parser.parser.validator import validate

"""Validation message format contract.

Messages are part of the public output (error log, diagnostics), so their
wording is pinned here exactly.
"""

VALID_ROW = "Mollis consequat,9.00,2"


@pytest.mark.parametrize("i", range(len(CART_SCHEMA)))
def test_header_mismatch_at_each_position(i):
    tokens = list(CART_SCHEMA.names)
    tokens[i] = "Wrong"
    errors = validate(",".join(tokens) + "\n" + VALID_ROW)
    assert len(errors) == 1
    err = errors[0]
    assert (err.type, err.row, err.column) == (ErrorKind.HEADER, 0, i)
    assert err.message == f'Expected header to be named "{CART_SCHEMA.names[i]}" but received Wrong.'


@pytest.mark.parametrize("line,received", [
    (" ", 1),
    ("Mollis consequat", 1),
    ("Mollis consequat,9.00", 2),
])
def test_row_length_message(line, received):
    errors = validate("Product name,Price,Quantity\n" + line)
    assert len(errors) == 1
    assert errors[0].type is ErrorKind.ROW
    assert errors[0].column == -1
    assert errors[0].message == f"Expected row to have 3 cells but received {received}."


def test_string_cell_message():
    errors = validate("Product name,Price,Quantity\n  ,1,1")
    assert errors[0].message == 'Expected cell to be a nonempty string but received "".'


@pytest.mark.parametrize("column,cell", [(1, "abc"), (1, "-0.01"), (2, "-10"), (2, "two")])
def test_number_cell_message(column, cell):
    cells = ["Mollis consequat", "1", "1"]
    cells[column] = cell
    errors = validate("Product name,Price,Quantity\n" + ",".join(cells))
    assert len(errors) == 1
    assert (errors[0].type, errors[0].row, errors[0].column) == (ErrorKind.CELL, 1, column)
    assert errors[0].message == f'Expected cell to be a positive number but received "{cell}".'
