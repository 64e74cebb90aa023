from datetime import datetime

from expense_vault.analytics import (
    CATEGORIES,
    LedgerView,
    budget_ratio,
    category_totals,
    chronological_series,
    direction_totals,
    filter_by_direction,
    filter_by_merchant,
    running_total,
)
from expense_vault.models import Transaction


def _tx(tx_id, amount, category, is_credit=False, merchant="Shop", day=1):
    return Transaction(
        id=tx_id,
        amount=amount,
        merchant=merchant,
        category=category,
        method="UPI",
        date=datetime(2024, 1, day),
        is_credit=is_credit,
    )


TXS = [
    _tx("4", 2000, "Travel", merchant="Uber", day=4),
    _tx("3", 500000, "Income", is_credit=True, merchant="Acme Systems", day=3),
    _tx("2", 15000, "Food", merchant="Starbucks", day=2),
    _tx("1", 30000, "Food", merchant="Swiggy Instamart", day=1),
]


def test_filter_by_merchant_case_insensitive_substring():
    assert [t.id for t in filter_by_merchant(TXS, "STAR")] == ["2"]
    assert [t.id for t in filter_by_merchant(TXS, "s")] == ["3", "2", "1"]
    assert filter_by_merchant(TXS, "zzz") == []
    assert filter_by_merchant(TXS, "") == TXS


def test_filter_by_direction():
    assert [t.id for t in filter_by_direction(TXS, "credit")] == ["3"]
    assert [t.id for t in filter_by_direction(TXS, "Debit")] == ["4", "2", "1"]
    assert filter_by_direction(TXS, "all") == TXS


def test_category_totals_report_every_category():
    totals = category_totals(TXS)
    assert list(totals) == list(CATEGORIES)
    assert totals["Food"] == 45000
    assert totals["Shopping"] == 0
    assert totals["Bills"] == 0
    assert totals["Income"] == 500000


def test_category_totals_consistent_with_running_total():
    credit, debit = direction_totals(TXS)
    assert sum(category_totals(TXS).values()) == credit + debit
    assert sum(category_totals(TXS).values()) == running_total(TXS, signed=False)

    debits = filter_by_direction(TXS, "debit")
    assert sum(category_totals(debits).values()) == -running_total(debits)


def test_running_total_signed():
    assert running_total(TXS) == 500000 - 2000 - 15000 - 30000
    assert running_total([]) == 0


def test_chronological_series_is_oldest_first():
    series = chronological_series(TXS)
    assert [amt for _, amt in series] == [30000, 15000, 500000, 2000]
    assert series[0][0] < series[-1][0]


def test_budget_ratio_is_clamped():
    assert budget_ratio(60000, 50000) == 1.0
    assert budget_ratio(25000, 50000) == 0.5
    assert budget_ratio(-10, 50000) == 0.0
    assert budget_ratio(10, 0) == 1.0
    assert budget_ratio(0, 0) == 0.0


def test_ledger_view_reads_live_state(vault):
    view = LedgerView(vault.ledger)
    assert view.running_total() == 0

    vault.engine.add_entry(100, "Cafe", "Food", "Cash")
    assert view.category_totals()["Food"] == 10000
    assert view.running_total() == -10000

    vault.engine.add_entry(1000, "Salary", "Income", "Net Banking")
    assert view.direction_totals() == (100000, 10000)
    assert view.budget_ratio(20000) == 0.5
    assert [t.merchant for t in view.filter_by_direction("credit")] == ["Salary"]
