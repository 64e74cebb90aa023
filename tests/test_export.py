import csv
import io
from datetime import datetime

from expense_vault.analytics import to_csv, write_csv
from expense_vault.models import Transaction


def _two():
    return [
        Transaction("2", 125050, "Starbucks, Mg Road", "Food", "UPI", datetime(2024, 1, 2, 8, 0), False),
        Transaction("1", 500000, "Acme", "Income", "Bank", datetime(2024, 1, 1, 9, 0), True),
    ]


def test_csv_has_header_plus_one_line_per_transaction():
    out = to_csv(_two())
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "Date,Merchant,Category,Amount"


def test_csv_rows_follow_ledger_order_and_columns():
    rows = list(csv.reader(io.StringIO(to_csv(_two()))))
    assert rows[1] == ["2024-01-02T08:00:00", "Starbucks, Mg Road", "Food", "1250.50"]
    assert rows[2] == ["2024-01-01T09:00:00", "Acme", "Income", "5000.00"]


def test_csv_empty_ledger_is_header_only():
    assert to_csv([]) == "Date,Merchant,Category,Amount\n"


def test_write_csv(tmp_path):
    path = write_csv(_two(), tmp_path / "vault.csv")
    assert path.read_text(encoding="utf-8").count("\n") == 3
