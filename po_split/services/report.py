from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..errors import InvalidQuantity
from ..models.order_row import OrderRow
from ..models.report import BOX_SIZE, Report, StoreAggregate
from .classifier import DEFAULT_MARKER, has_marker

"""Report aggregator.

Totals label quantities per store key, split into tagged (marker present)
and untagged, plus grand totals and a shipping-box estimate
(ceil(total / box_size)). Stores keep first-occurrence order.

Duplicated rows coming out of the filter are counted once per occurrence.
"""

__all__ = [
    "parse_quantity",
    "aggregate",
]

_QTY_PATTERN = re.compile(r"^[0-9]+$")

logger = logging.getLogger(__name__)


def parse_quantity(row: OrderRow) -> int:
    """Parse the row quantity as a non-negative integer.

    Raises:
        InvalidQuantity: anything but ASCII digits, e.g. blank, signed or "٣"
    """
    text = row.qty.strip()
    if not _QTY_PATTERN.match(text):
        raise InvalidQuantity(f"store {row.po}: invalid quantity {row.qty!r} (upc={row.upc})")
    return int(text)


def aggregate(
    rows: Sequence[OrderRow],
    marker: str = DEFAULT_MARKER,
    box_size: int = BOX_SIZE,
) -> Report:
    stores: dict[str, StoreAggregate] = {}
    for row in rows:
        qty = parse_quantity(row)
        agg = stores.get(row.po)
        if agg is None:
            agg = stores[row.po] = StoreAggregate(key=row.po, box_size=box_size)
        if has_marker(row, marker):
            agg.tagged_total += qty
        else:
            agg.untagged_total += qty

    report = Report(
        stores=list(stores.values()),
        grand_tagged=sum(a.tagged_total for a in stores.values()),
        grand_untagged=sum(a.untagged_total for a in stores.values()),
        box_size=box_size,
    )
    logger.debug("aggregated %d rows into %d stores", len(rows), report.store_count)
    return report
