from __future__ import annotations

from ..models.processing_result import SplitResult
from ..models.report import Report, StoreAggregate

"""Text rendering for report and split results.

Report mode prints one line per store, a totals block, then a SUMMARY line:

    Store 123-014: labels=120 tagged=20 untagged=100 boxes=2
    ...
    Stores: 3
    Total labels: 420
    Tagged: 60
    Untagged: 360
    Boxes: 7
    SUMMARY stores=3 labels=420 tagged=60 untagged=360 boxes=7

The SUMMARY strings returned here include the "SUMMARY " prefix; callers
logging through log_summary() have it dropped there.
"""


def render_store_line(agg: StoreAggregate) -> str:
    return (
        f"Store {agg.key}: labels={agg.total} "
        f"tagged={agg.tagged_total} "
        f"untagged={agg.untagged_total} "
        f"boxes={agg.boxes}"
    )


def render_totals_block(report: Report) -> list[str]:
    return [
        f"Stores: {report.store_count}",
        f"Total labels: {report.grand_total}",
        f"Tagged: {report.grand_tagged}",
        f"Untagged: {report.grand_untagged}",
        f"Boxes: {report.grand_boxes}",
    ]


def render_report(report: Report) -> list[str]:
    """All report lines in print order (stores first, totals last)."""
    return [render_store_line(agg) for agg in report.stores] + render_totals_block(report)


def render_summary_line(report: Report) -> str:
    return (
        f"SUMMARY stores={report.store_count} "
        f"labels={report.grand_total} "
        f"tagged={report.grand_tagged} "
        f"untagged={report.grand_untagged} "
        f"boxes={report.grand_boxes}"
    )


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_split_summary_line(result: SplitResult) -> str:
    """Render the split-mode SUMMARY line.

    Examples:
        >>> from pathlib import Path
        >>> r = SplitResult(written_files=[Path("a.csv")], rows_written=4,
        ...                 tagged_rows=1, zeroed_rows=1, elapsed_seconds=2.0)
        >>> render_split_summary_line(r)
        'SUMMARY files=1 rows=4 tagged=1 zeroed=1 elapsed_sec=2'
    """
    return (
        f"SUMMARY files={result.file_count} "
        f"rows={result.rows_written} "
        f"tagged={result.tagged_rows} "
        f"zeroed={result.zeroed_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
