from __future__ import annotations

"""Exceptions raised by the cart parser."""


class CartParserError(Exception):
    """Base exception for cart parsing errors."""


class ValidationFailedError(CartParserError):
    """Raised by ``CartParser.parse`` when the file has validation errors.

    The individual errors are reported to the diagnostic sink, not carried
    on the exception. Call ``validate`` to inspect them.
    """

    def __init__(self, message: str = "Validation failed!") -> None:
        super().__init__(message)
