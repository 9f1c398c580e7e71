from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Split-mode processing result.

Aggregated outcome of one split run, used for the SUMMARY output line.
"""


@dataclass(frozen=True)
class SplitResult:
    """Outcome of writing the per-store files."""
    written_files: list[Path]  # in creation order
    rows_written: int  # data rows across all files (header excluded)
    tagged_rows: int  # rows carrying the marker
    zeroed_rows: int  # tagged rows whose qty was forced to "0"
    start_time: datetime | None = None
    end_time: datetime | None = None
    elapsed_seconds: float = 0.0

    @property
    def file_count(self) -> int:
        return len(self.written_files)
