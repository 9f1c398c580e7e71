from __future__ import annotations

import csv
import logging
from pathlib import Path

from ..errors import MalformedRecord, ResourceUnavailable
from ..models.order_row import FIELD_COUNT, OrderRow

"""Purchase-order CSV reader.

Row 1 is the header and is consumed; every later non-blank row becomes an
OrderRow. All values are kept as text exactly as written (no NaN conversion,
no numeric inference) so that keys such as "014" keep their leading zeros.

Decoding is strict: the header must have at least FIELD_COUNT columns and every
data row must have as many fields as the header. The first bad row fails the
whole load; no partial result is returned. Columns after Qty are ignored.
A zero-byte or blank-only input has no header and loads as zero rows.
"""

__all__ = [
    "read_orders",
    "read_records",
]

logger = logging.getLogger(__name__)


def read_records(path: Path, encoding: str = "utf-8") -> tuple[list[str], list[list[str]]]:
    """Read header and data records, checking every record's width.

    Raises:
        ResourceUnavailable: file missing / not readable
        MalformedRecord: undecodable bytes or a ragged row
    """
    try:
        with path.open(newline="", encoding=encoding) as f:
            reader = csv.reader(f)
            header: list[str] | None = None
            records: list[list[str]] = []
            for fields in reader:
                if not fields:
                    continue  # blank line
                if header is None:
                    header = fields
                    if len(header) < FIELD_COUNT:
                        raise MalformedRecord(
                            f"{path}: expected at least {FIELD_COUNT} columns, header has {len(header)}"
                        )
                    continue
                if len(fields) != len(header):
                    raise MalformedRecord(
                        f"{path}: row {len(records) + 1} (line {reader.line_num}) has "
                        f"{len(fields)} fields, expected {len(header)}"
                    )
                records.append(fields)
    except csv.Error as e:
        raise MalformedRecord(f"{path}: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedRecord(f"{path}: cannot decode as {encoding}: {e}") from e
    except OSError as e:
        raise ResourceUnavailable(f"cannot open input file {path}: {e}") from e

    if header is None:
        logger.debug("%s is empty, no rows loaded", path)
        return [], []
    return header, records


def read_orders(path: Path, encoding: str = "utf-8") -> list[OrderRow]:
    """Load every data row of the export, preserving source order.

    Raises:
        ResourceUnavailable: input file cannot be opened
        MalformedRecord: a row cannot be decoded into the 9-field shape
    """
    _, records = read_records(path, encoding=encoding)
    rows = [OrderRow.from_fields(fields[:FIELD_COUNT]) for fields in records]
    logger.debug("read %d rows from %s", len(rows), path)
    return rows
