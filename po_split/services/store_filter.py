from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..models.order_row import OrderRow

"""Store filter.

Keeps the rows whose PO key refers to one of the requested stores.

Matching: the identifier must appear in the key at the very start or right
after the separator, i.e. `separator + identifier` is a substring of
`separator + key`. With the default "-":

    "014" matches "014", "X-014", "PO-0145"
    "014" does not match "1140"

An empty separator falls back to a plain substring test.

The scan is identifier-major and does not deduplicate: a row matched by two
identifiers (or by one identifier listed twice) is emitted once per match.
Downstream files and totals see those duplicates. The one deliberate exception
is an empty identifier: it is dropped instead of matching every key, so a
trailing comma in the store list does not pull in the whole export.
"""

__all__ = [
    "DEFAULT_SEPARATOR",
    "key_matches",
    "filter_rows",
]

DEFAULT_SEPARATOR = "-"

logger = logging.getLogger(__name__)


def key_matches(key: str, identifier: str, separator: str = DEFAULT_SEPARATOR) -> bool:
    """Whether a PO key refers to the given store identifier."""
    if not identifier:
        return False
    return f"{separator}{identifier}" in f"{separator}{key}"


def filter_rows(
    rows: Sequence[OrderRow],
    identifiers: Iterable[str],
    separator: str = DEFAULT_SEPARATOR,
) -> list[OrderRow]:
    """Return every row matching each identifier, identifier by identifier."""
    filtered: list[OrderRow] = []
    for identifier in identifiers:
        if not identifier:
            logger.debug("skipping empty store identifier")
            continue
        matched = [row for row in rows if key_matches(row.po, identifier, separator)]
        if not matched:
            logger.debug("no rows for store %s", identifier)
        filtered.extend(matched)
    return filtered
