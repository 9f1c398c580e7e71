from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

import pandas as pd

from ..errors import ResourceUnavailable
from ..models.order_row import OUTPUT_COLUMNS, NormalizedOrder, OrderRow
from ..models.processing_result import SplitResult
from .classifier import DEFAULT_MARKER, has_marker
from .progress import ProgressTracker

"""Partitioned writer: one normalized CSV per store key.

- Keys are written in order of first occurrence in the filtered rows
- Rows keep their filtered order inside a file (no sorting)
- StoreNum is always blank; Qty is "0" for tagged rows unless override_all
- Each file is closed before the next one is opened; a failure stops the run
  and files already written stay on disk
"""

__all__ = [
    "group_by_key",
    "normalize_partition",
    "write_partitions",
]

logger = logging.getLogger(__name__)


def group_by_key(rows: Sequence[OrderRow]) -> dict[str, list[OrderRow]]:
    """Group rows by PO key (dict keeps first-occurrence order)."""
    groups: dict[str, list[OrderRow]] = {}
    for row in rows:
        groups.setdefault(row.po, []).append(row)
    return groups


def normalize_partition(
    rows: Sequence[OrderRow], override_all: bool = False, marker: str = DEFAULT_MARKER
) -> list[NormalizedOrder]:
    return [row.normalized(has_marker(row, marker), override_all) for row in rows]


def _target_path(destination_dir: Path, key: str, suffix: str) -> Path:
    name = f"{key}{suffix}"
    # a key must not escape the destination directory
    if Path(name).name != name or key in ("", ".", ".."):
        raise ResourceUnavailable(f"store key {key!r} is not usable as a file name")
    return destination_dir / name


def _write_partition(target: Path, orders: list[NormalizedOrder], encoding: str) -> None:
    frame = pd.DataFrame([o.as_list() for o in orders], columns=OUTPUT_COLUMNS, dtype=str)
    try:
        with target.open("w", encoding=encoding, newline="") as handle:
            frame.to_csv(handle, index=False, lineterminator="\n")
    except OSError as e:
        raise ResourceUnavailable(f"cannot write output file {target}: {e}") from e


def write_partitions(
    rows: Sequence[OrderRow],
    destination_dir: Path,
    override_all: bool = False,
    *,
    marker: str = DEFAULT_MARKER,
    encoding: str = "utf-8",
    suffix: str = ".csv",
) -> SplitResult:
    """Write one `<key><suffix>` file per distinct key under destination_dir.

    An empty row sequence writes nothing.

    Raises:
        ResourceUnavailable: destination or a per-store file cannot be created
    """
    start_time = datetime.now(UTC)
    groups = group_by_key(rows)

    if groups:
        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ResourceUnavailable(f"cannot create output directory {destination_dir}: {e}") from e

    written: list[Path] = []
    rows_written = 0
    tagged_rows = 0
    zeroed_rows = 0

    with ProgressTracker(len(groups)) as progress:
        for key, partition in groups.items():
            progress.start(key)
            target = _target_path(destination_dir, key, suffix)
            orders = normalize_partition(partition, override_all, marker)
            _write_partition(target, orders, encoding)

            tagged = sum(1 for row in partition if has_marker(row, marker))
            tagged_rows += tagged
            if not override_all:
                zeroed_rows += tagged
            rows_written += len(orders)
            written.append(target)
            logger.debug("wrote %d rows (%d tagged) to %s", len(orders), tagged, target)

            progress.set_postfix(rows=rows_written)
            progress.finish()

    end_time = datetime.now(UTC)
    return SplitResult(
        written_files=written,
        rows_written=rows_written,
        tagged_rows=tagged_rows,
        zeroed_rows=zeroed_rows,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
