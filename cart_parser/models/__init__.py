"""Domain models for the cart CSV parser.

This package contains the schema table, validation error records, cart items,
parse results and the batch processing result models.
"""

from .cart_item import CartItem
from .error_record import ErrorRecord
from .parse_result import ParseResult
from .processing_result import FileStat, FileStatus, ProcessingResult
from .schema import CART_SCHEMA, CartSchema, Column, ColumnType
from .validation_error import ErrorKind, ValidationError

__all__ = [
    # Schema
    "CART_SCHEMA",
    "CartSchema",
    "Column",
    "ColumnType",
    # Validation
    "ErrorKind",
    "ValidationError",
    "ErrorRecord",
    # Parsing
    "CartItem",
    "ParseResult",
    # Batch processing
    "FileStat",
    "FileStatus",
    "ProcessingResult",
]
