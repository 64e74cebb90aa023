from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from ..categories import CATEGORIES
from ..models import Direction, Transaction
from ..storage.ledger import Ledger

DIRECTIONS: tuple[str, ...] = ("all", "credit", "debit")


def filter_by_merchant(txs: Iterable[Transaction], query: str | None) -> list[Transaction]:
    q = (query or "").strip().lower()
    if not q:
        return list(txs)
    return [t for t in txs if q in t.merchant.lower()]


def filter_by_direction(txs: Iterable[Transaction], mode: Direction | str = "all") -> list[Transaction]:
    m = (mode or "all").strip().lower()
    if m not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {mode!r}")
    if m == "credit":
        return [t for t in txs if t.is_credit]
    if m == "debit":
        return [t for t in txs if not t.is_credit]
    return list(txs)


def category_totals(txs: Iterable[Transaction]) -> dict[str, int]:
    """
    Sum of amounts per category, in minor units. Every category is
    present, including empty ones.
    """
    totals = {c: 0 for c in CATEGORIES}
    for t in txs:
        totals[t.category] = totals.get(t.category, 0) + t.amount
    return totals


def direction_totals(txs: Iterable[Transaction]) -> tuple[int, int]:
    credit = 0
    debit = 0
    for t in txs:
        if t.is_credit:
            credit += t.amount
        else:
            debit += t.amount
    return credit, debit


def running_total(txs: Iterable[Transaction], signed: bool = True) -> int:
    # signed: credits minus debits
    if signed:
        return sum(t.signed_amount for t in txs)
    return sum(t.amount for t in txs)


def chronological_series(txs: Sequence[Transaction]) -> list[tuple[datetime, int]]:
    # ledger order is most recent first
    return [(t.date, t.amount) for t in reversed(txs)]


def budget_ratio(total: float, budget: float) -> float:
    if budget <= 0:
        return 1.0 if total > 0 else 0.0
    return min(1.0, max(0.0, total / budget))


class LedgerView:
    """Read-only facade for the UI; every call reads the live ledger."""

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def transactions(self) -> list[Transaction]:
        return self.ledger.snapshot()

    def filter_by_merchant(self, query: str | None) -> list[Transaction]:
        return filter_by_merchant(self.ledger.snapshot(), query)

    def filter_by_direction(self, mode: Direction | str = "all") -> list[Transaction]:
        return filter_by_direction(self.ledger.snapshot(), mode)

    def category_totals(self) -> dict[str, int]:
        return category_totals(self.ledger.snapshot())

    def running_total(self, signed: bool = True) -> int:
        return running_total(self.ledger.snapshot(), signed=signed)

    def direction_totals(self) -> tuple[int, int]:
        return direction_totals(self.ledger.snapshot())

    def chronological_series(self) -> list[tuple[datetime, int]]:
        return chronological_series(self.ledger.snapshot())

    def budget_ratio(self, budget_minor: int) -> float:
        _, spent = self.direction_totals()
        return budget_ratio(spent, budget_minor)
