from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from .validation_error import ValidationError

"""ErrorRecord model for the structured error log.

Each record is one JSON Lines entry. Validation errors keep their positional
row/column; file-level failures (unreadable file, bad encoding) use row=-1
and column=-1 because no position applies.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Cart file name being processed
        row: Row index (0 = header). -1 for file-level errors
        column: Column index. -1 for row- or file-level errors
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Error description
    """
    timestamp: str  # ISO8601 UTC
    file: str
    row: int
    column: int
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, row: int, column: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=row,
            column=column,
            error_type=error_type,
            message=message,
        )

    @staticmethod
    def from_validation_error(file: str, error: ValidationError) -> ErrorRecord:
        return ErrorRecord.create(
            file=file,
            row=error.row,
            column=error.column,
            error_type=error.type.name,
            message=error.message,
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line with the fixed key set."""
        return json.dumps(asdict(self), ensure_ascii=False)
