"""Validation and parsing pipeline for cart CSV files."""

from .aggregator import calc_total, round_total
from .cart_parser import CartParser, log_validation_errors, read_text_file
from .exceptions import CartParserError, ValidationFailedError
from .line_parser import parse_line, split_cells, split_lines
from .validator import validate

__all__ = [
    "CartParser",
    "CartParserError",
    "ValidationFailedError",
    "calc_total",
    "round_total",
    "log_validation_errors",
    "parse_line",
    "read_text_file",
    "split_cells",
    "split_lines",
    "validate",
]
