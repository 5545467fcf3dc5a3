from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""ValidationError model returned by the cart validator.

Row and column follow a positional convention:
- row 0 is the header row, body rows are numbered from 1 (blank lines are not counted)
- column is the 0-based column index, or -1 for row-level errors
"""

__all__ = [
    "ErrorKind",
    "ValidationError",
]


class ErrorKind(Enum):
    """Classification of a validation error.

    - HEADER: wrong column label at a header position
    - ROW: body row has fewer cells than the schema
    - CELL: a cell value violates its column type
    """
    HEADER = "header"
    ROW = "row"
    CELL = "cell"


@dataclass(frozen=True)
class ValidationError:
    """Structured, positional validation error.

    Attributes:
        type: Error classification
        row: Row index (0 = header, 1-based body rows)
        column: Column index (0-based). -1 for row-level errors
        message: Human readable description
    """
    type: ErrorKind
    row: int
    column: int  # 行単位エラーは -1
    message: str

    @property
    def is_row_level(self) -> bool:
        return self.column == -1
