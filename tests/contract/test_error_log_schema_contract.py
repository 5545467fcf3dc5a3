from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from cart_parser.models.error_record import ErrorRecord
from cart_parser.models.validation_error import ErrorKind, ValidationError

"""Error log JSON Lines schema contract test."""

SCHEMA_PATH = Path(__file__).with_name("error_log_schema.json")


@pytest.fixture(scope="module")
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "cart.csv",
        "row": 1,
        "column": 2,
        "error_type": "CELL",
        "message": 'Expected cell to be a positive number but received "-10".',
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "cart.csv",
        "row": 1,
        "column": 2,
        "error_type": "CELL",
        "message": "x",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


@pytest.mark.parametrize("kind,row,column", [
    (ErrorKind.HEADER, 0, 1),
    (ErrorKind.ROW, 3, -1),
    (ErrorKind.CELL, 1, 0),
])
def test_records_from_validation_errors_match_schema(schema, kind, row, column):
    err = ValidationError(type=kind, row=row, column=column, message="m")
    line = ErrorRecord.from_validation_error("cart.csv", err).to_json_line()
    jsonschema.validate(json.loads(line), schema)


def test_file_level_record_matches_schema(schema):
    line = ErrorRecord.create("cart.csv", -1, -1, "FILE_READ_ERROR", "boom").to_json_line()
    jsonschema.validate(json.loads(line), schema)
