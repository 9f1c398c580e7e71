from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass

"""OrderRow / NormalizedOrder models.

An OrderRow is one line item of the purchase-order export, decoded once at load
time so that later stages use field names instead of column positions.

Column positions (input):
    0 po, 1 style_code, 2 color_code, 3 msrp_size, 4 style_desc,
    5 color_desc, 6 upc, 7 store_num, 8 qty
"""

__all__ = [
    "FIELD_COUNT",
    "OUTPUT_COLUMNS",
    "OrderRow",
    "NormalizedOrder",
]

FIELD_COUNT = 9

# Header written to every per-store file
OUTPUT_COLUMNS = [
    "Po",
    "StyleCode",
    "ColorCode",
    "MsrpSize",
    "StyleDesc",
    "ColorDesc",
    "Upc",
    "StoreNum",
    "Qty",
]


@dataclass(frozen=True)
class NormalizedOrder:
    """Output record shape. store_num is always empty; qty may be zeroed."""
    po: str
    style_code: str
    color_code: str
    msrp_size: str
    style_desc: str
    color_desc: str
    upc: str
    store_num: str
    qty: str

    def as_list(self) -> list[str]:
        return list(astuple(self))


@dataclass(frozen=True)
class OrderRow:
    """A single purchase-order line as read from the export (all text)."""
    po: str  # store / PO key
    style_code: str
    color_code: str
    msrp_size: str
    style_desc: str
    color_desc: str
    upc: str
    store_num: str
    qty: str

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> OrderRow:
        """Build a row from exactly FIELD_COUNT positional values.

        Raises:
            ValueError: if the number of fields is not FIELD_COUNT
        """
        if len(fields) != FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
        return cls(*(str(v) for v in fields))

    def normalized(self, tagged: bool, override_all: bool = False) -> NormalizedOrder:
        """Return the output record for this row.

        Quantity is forced to "0" when the row is tagged and override_all is off.
        """
        qty = "0" if tagged and not override_all else self.qty
        return NormalizedOrder(
            po=self.po,
            style_code=self.style_code,
            color_code=self.color_code,
            msrp_size=self.msrp_size,
            style_desc=self.style_desc,
            color_desc=self.color_desc,
            upc=self.upc,
            store_num="",
            qty=qty,
        )
