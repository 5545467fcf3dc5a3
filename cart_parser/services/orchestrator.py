from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import CartConfig
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.parse_result import ParseResult
from ..models.processing_result import FileStat, FileStatus, ProcessingResult
from ..models.validation_error import ValidationError
from ..parser.aggregator import round_total
from ..parser.cart_parser import CartParser, log_validation_errors
from ..parser.exceptions import ValidationFailedError
from .progress import ProgressTracker

"""Batch orchestration: parse every cart file of a directory.

Each file is parsed independently; a failing file is recorded and the run
continues with the next one. Validation details and read failures are
buffered as ErrorRecords and flushed once at the end of the run.
"""

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Fatal error that prevents a batch run (e.g. missing directory)."""


def scan_cart_files(directory: Path, pattern: str = "*.csv") -> list[Path]:
    """Scan directory for cart files (non-recursive, sorted by name).

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(p for p in directory.glob(pattern) if p.is_file())
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


class _ErrorLogSink:
    """Diagnostic sink forwarding validation errors to the log and error buffer."""

    def __init__(self, error_log: ErrorLogBuffer) -> None:
        self.error_log = error_log

    def __call__(self, source: str, errors: Sequence[ValidationError]) -> None:
        log_validation_errors(source, errors)
        file_name = Path(source).name
        for e in errors:
            self.error_log.append(ErrorRecord.from_validation_error(file_name, e))


def _process_single_file(
    file_path: Path,
    parser: CartParser,
    error_log: ErrorLogBuffer,
) -> tuple[FileStat, ParseResult | None]:
    start = datetime.now(UTC)
    result: ParseResult | None = None
    error: str | None = None
    try:
        result = parser.parse(file_path)
        status = FileStatus.SUCCESS
    except ValidationFailedError as e:
        status = FileStatus.INVALID
        error = str(e)
    except (OSError, UnicodeDecodeError) as e:
        # 読めないファイルは位置情報なし (-1, -1)
        status = FileStatus.READ_ERROR
        error = str(e)
        logger.error(f"{file_path.name}: read failed: {e}")
        error_log.append(ErrorRecord.create(
            file=file_path.name,
            row=-1,
            column=-1,
            error_type="FILE_READ_ERROR",
            message=str(e),
        ))
    elapsed = (datetime.now(UTC) - start).total_seconds()

    stat = FileStat(
        file_name=file_path.name,
        status=status,
        items=len(result.items) if result else 0,
        total=result.total if result else 0.0,
        elapsed_seconds=elapsed,
        error=error,
    )
    return stat, result


def process_all(config: CartConfig, parser: CartParser | None = None) -> ProcessingResult:
    """Parse all cart files in the configured directory.

    Args:
        config: Batch configuration (directory, pattern, encoding, logs dir)
        parser: Parser to use. When None, one is built whose diagnostic sink
            writes to this run's error log.

    Returns:
        ProcessingResult with per-file stats and successful ParseResults

    Raises:
        ProcessingError: If the source directory cannot be scanned
    """
    start_time = datetime.now(UTC)
    error_log = ErrorLogBuffer(Path(config.logs_directory))
    if parser is None:
        parser = CartParser(sink=_ErrorLogSink(error_log), encoding=config.encoding)

    file_paths = scan_cart_files(Path(config.source_directory), config.file_pattern)
    logger.debug(f"found {len(file_paths)} cart file(s) matching {config.file_pattern}")

    file_stats: list[FileStat] = []
    results: dict[str, ParseResult] = {}
    success_count = 0
    failed_count = 0
    total_items = 0
    grand_total = 0.0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            stat, result = _process_single_file(file_path, parser, error_log)
            file_stats.append(stat)

            if result is not None:
                success_count += 1
                total_items += len(result.items)
                grand_total += result.total
                results[file_path.name] = result
                logger.info(f"{file_path.name}: items={len(result.items)} total={result.total:.2f}")
            else:
                failed_count += 1
                logger.warning(f"{file_path.name}: {stat.status.value} ({stat.error})")

            progress.finish_file(success=success_count, failed=failed_count)

    flushed = error_log.flush()
    if flushed is not None:
        logger.info(f"error log written: {flushed}")

    end_time = datetime.now(UTC)
    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_items=total_items,
        grand_total=round_total(grand_total),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
        results=results,
    )
