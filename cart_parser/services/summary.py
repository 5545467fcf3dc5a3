from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs."""


def _format_number(value: float) -> str:
    # 整数値は小数点なし、極小値は指数表記を避ける
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if abs(value) < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY line for a batch run.

    Format:
    SUMMARY files={n}/{n} success={success} failed={failed} items={items}
    total={grand_total} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2023, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2023, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_items=5, grand_total=348.32,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY files=1/1 success=1 failed=0 items=5 total=348.32 elapsed_sec=2'
    """
    total_files = result.total_files
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"items={result.total_items} "
        f"total={result.grand_total:.2f} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)}"
    )
