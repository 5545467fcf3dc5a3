from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from ..logging.init import log_validation_errors
from ..models.cart_item import CartItem
from ..models.parse_result import ParseResult
from ..models.schema import CART_SCHEMA, CartSchema
from ..models.validation_error import ValidationError
from .aggregator import calc_total, round_total
from .exceptions import ValidationFailedError
from .line_parser import parse_line, split_lines
from .validator import validate

"""CartParser: reads a cart CSV file, validates it and builds a ParseResult.

Collaborators are injected so the pipeline itself stays free of I/O:
- reader: path -> text (default: UTF-8 file read)
- id_factory: () -> unique id string (default: uuid4)
- sink: receives the validation errors when ``parse`` aborts (default: logger)

Flow: read -> validate (fail fast) -> split lines -> parse_line per row -> total.
"""

__all__ = [
    "CartParser",
    "DiagnosticSink",
    "log_validation_errors",
    "read_text_file",
]

logger = logging.getLogger(__name__)

Reader = Callable[[Path], str]
IdFactory = Callable[[], str]
DiagnosticSink = Callable[[str, Sequence[ValidationError]], None]


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Read the entire contents of a text file."""
    return Path(path).read_text(encoding=encoding)


def new_item_id() -> str:
    return str(uuid.uuid4())


class CartParser:
    """Validates and parses cart CSV files against a fixed column schema."""

    def __init__(
        self,
        *,
        reader: Reader | None = None,
        id_factory: IdFactory | None = None,
        sink: DiagnosticSink | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.schema: CartSchema = CART_SCHEMA
        self.encoding = encoding
        self._reader = reader or (lambda p: read_text_file(p, encoding=self.encoding))
        self._id_factory = id_factory or new_item_id
        self._sink = sink or log_validation_errors

    def parse(self, path: str | Path) -> ParseResult:
        """Read, validate and parse a cart file.

        Args:
            path: Path to a CSV cart file

        Returns:
            ParseResult with items in file order and total rounded to 2 decimals

        Raises:
            ValidationFailedError: If validation produced any error. The errors
                themselves go to the diagnostic sink only.
            OSError / UnicodeDecodeError: If the file cannot be read
        """
        path = Path(path)
        contents = self._reader(path)
        errors = self.validate(contents)
        if errors:
            self._sink(str(path), errors)
            raise ValidationFailedError()

        lines = split_lines(contents)[1:]  # ヘッダ行を除外
        items = tuple(self.parse_line(line) for line in lines)
        total = self.calc_total(items)
        logger.debug(f"parsed {path.name}: items={len(items)} total={total}")
        return ParseResult(items=items, total=round_total(total))

    def validate(self, contents: str) -> list[ValidationError]:
        """Validate file contents. Never raises; empty list means valid."""
        return validate(contents, self.schema)

    def parse_line(self, csv_line: str) -> CartItem:
        """Convert one validated CSV line into a CartItem with a fresh id."""
        return parse_line(csv_line, self._id_factory, self.schema)

    def calc_total(self, items: Iterable[CartItem]) -> float:
        """Sum of ``price * quantity`` (unrounded)."""
        return calc_total(items)
