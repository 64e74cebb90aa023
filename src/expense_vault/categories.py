from __future__ import annotations

# Closed set: aggregation reports every bucket, even when empty.
CATEGORIES: tuple[str, ...] = ("Food", "Shopping", "Bills", "Travel", "Income", "Other")

INCOME_CATEGORY = "Income"
DEFAULT_CATEGORY = "Other"

PAYMENT_METHODS: tuple[str, ...] = ("UPI", "Credit Card", "Debit Card", "Cash", "Net Banking")
ALERT_METHOD = "Bank"


def default_category(is_credit: bool) -> str:
    return INCOME_CATEGORY if is_credit else DEFAULT_CATEGORY


def normalize_category(name: str | None) -> str | None:
    """
    "food" -> "Food". Returns None for names outside the set.
    """
    if not name:
        return None
    n = name.strip().lower()
    for c in CATEGORIES:
        if c.lower() == n:
            return c
    return None
