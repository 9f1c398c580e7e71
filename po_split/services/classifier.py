from __future__ import annotations

from ..models.order_row import OrderRow

DEFAULT_MARKER = "$"


def has_marker(row: OrderRow, marker: str = DEFAULT_MARKER) -> bool:
    """True when the style description carries the tag marker (item already tagged)."""
    return marker in row.style_desc
