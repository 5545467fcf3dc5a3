from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .parse_result import ParseResult

"""Processing result models for batch cart processing.

ProcessingResult aggregates per-file outcomes of one run and feeds the
SUMMARY line.
"""


class FileStatus(Enum):
    """Outcome of parsing a single cart file.

    - SUCCESS: validated and parsed
    - INVALID: validation failed (details in the error log)
    - READ_ERROR: file could not be read or decoded
    """
    SUCCESS = "success"
    INVALID = "invalid"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str
    status: FileStatus
    items: int  # 成功時のみ
    total: float  # 成功時のみ
    elapsed_seconds: float
    error: str | None = None  # 失敗理由の要約


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a batch run."""
    success_files: int
    failed_files: int
    total_items: int
    grand_total: float  # 成功ファイル total の合計 (2桁丸め)
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] = field(default_factory=list)
    results: dict[str, ParseResult] = field(default_factory=dict)  # file name -> result

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
