from __future__ import annotations

import logging
from pathlib import Path

from ..config.loader import SplitConfig
from ..models.order_row import OrderRow
from ..models.processing_result import SplitResult
from ..models.report import Report
from ..tabular.reader import read_orders
from .partition_writer import write_partitions
from .report import aggregate
from .store_filter import filter_rows
from .store_list import parse_store_list

"""Pipeline entry points.

    parse store list ─┐
                      ├─> filter ─> write_partitions   (split)
    read orders ──────┘          └> aggregate          (report)

The whole input is loaded before anything is written. Any PipelineError
(ResourceUnavailable / MalformedRecord / InvalidQuantity) propagates to the
caller unchanged and ends the run.
"""

__all__ = [
    "load_filtered_rows",
    "run_split",
    "run_report",
]

logger = logging.getLogger(__name__)


def load_filtered_rows(input_path: Path, list_path: Path, config: SplitConfig) -> list[OrderRow]:
    """Read the store list and the export, then keep the requested stores."""
    identifiers = parse_store_list(list_path, encoding=config.encoding)
    rows = read_orders(input_path, encoding=config.encoding)
    logger.info(f"Loaded {len(rows)} rows from {input_path.name}")
    filtered = filter_rows(rows, identifiers, separator=config.key_separator)
    logger.info(f"Matched {len(filtered)} rows for {len(identifiers)} store identifiers")
    return filtered


def run_split(
    input_path: Path,
    output_path: Path,
    list_path: Path,
    override_all: bool = False,
    config: SplitConfig | None = None,
) -> SplitResult:
    """Filter the export and write one normalized file per store."""
    cfg = config or SplitConfig()
    filtered = load_filtered_rows(input_path, list_path, cfg)
    result = write_partitions(
        filtered,
        output_path,
        override_all,
        marker=cfg.marker,
        encoding=cfg.encoding,
        suffix=cfg.output_suffix,
    )
    logger.info(f"Wrote {result.file_count} store files to {output_path}")
    return result


def run_report(
    input_path: Path,
    list_path: Path,
    config: SplitConfig | None = None,
) -> Report:
    """Filter the export and total labels per store (no files written)."""
    cfg = config or SplitConfig()
    filtered = load_filtered_rows(input_path, list_path, cfg)
    return aggregate(filtered, marker=cfg.marker, box_size=cfg.box_size)

