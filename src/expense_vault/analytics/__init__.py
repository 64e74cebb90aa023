from ..categories import CATEGORIES, PAYMENT_METHODS
from .export import to_csv, write_csv
from .views import (
    LedgerView,
    budget_ratio,
    category_totals,
    chronological_series,
    direction_totals,
    filter_by_direction,
    filter_by_merchant,
    running_total,
)

__all__ = [
    "CATEGORIES",
    "PAYMENT_METHODS",
    "LedgerView",
    "budget_ratio",
    "category_totals",
    "chronological_series",
    "direction_totals",
    "filter_by_direction",
    "filter_by_merchant",
    "running_total",
    "to_csv",
    "write_csv",
]
