"""Domain models for the purchase-order split tool."""

from .order_row import FIELD_COUNT, OUTPUT_COLUMNS, NormalizedOrder, OrderRow
from .processing_result import SplitResult
from .report import Report, StoreAggregate, box_estimate
from .run_request import RunMode, RunRequest

__all__ = [
    # Row models
    "FIELD_COUNT",
    "OUTPUT_COLUMNS",
    "NormalizedOrder",
    "OrderRow",
    # Results
    "Report",
    "SplitResult",
    "StoreAggregate",
    "box_estimate",
    # Caller contract
    "RunMode",
    "RunRequest",
]
