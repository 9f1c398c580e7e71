from __future__ import annotations

from dataclasses import dataclass, field

"""Report models produced by the report aggregator."""

__all__ = [
    "box_estimate",
    "StoreAggregate",
    "Report",
]

BOX_SIZE = 60  # labels per shipping box


def box_estimate(total: int, box_size: int = BOX_SIZE) -> int:
    """Number of boxes needed for total labels (ceiling division)."""
    return -(-total // box_size)


@dataclass
class StoreAggregate:
    """Running per-store totals. Built transiently while aggregating."""
    key: str
    tagged_total: int = 0
    untagged_total: int = 0
    box_size: int = BOX_SIZE

    @property
    def total(self) -> int:
        return self.tagged_total + self.untagged_total

    @property
    def boxes(self) -> int:
        return box_estimate(self.total, self.box_size)


@dataclass(frozen=True)
class Report:
    """Per-store aggregates (first-occurrence order) plus grand totals."""
    stores: list[StoreAggregate] = field(default_factory=list)
    grand_tagged: int = 0
    grand_untagged: int = 0
    box_size: int = BOX_SIZE

    @property
    def store_count(self) -> int:
        return len(self.stores)

    @property
    def grand_total(self) -> int:
        return self.grand_tagged + self.grand_untagged

    @property
    def grand_boxes(self) -> int:
        return box_estimate(self.grand_total, self.box_size)
