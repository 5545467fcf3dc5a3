"""Cart CSV parser: schema validation, line parsing and totals for cart files."""

from .models import CART_SCHEMA, CartItem, ErrorKind, ParseResult, ValidationError
from .parser import CartParser, CartParserError, ValidationFailedError

__all__ = [
    "CART_SCHEMA",
    "CartItem",
    "CartParser",
    "CartParserError",
    "ErrorKind",
    "ParseResult",
    "ValidationError",
    "ValidationFailedError",
]

__version__ = "0.1.0"
