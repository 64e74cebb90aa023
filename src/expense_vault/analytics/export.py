from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

from ..models import Transaction, format_amount

CSV_HEADER = ("Date", "Merchant", "Category", "Amount")


def to_csv(txs: Iterable[Transaction]) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(CSV_HEADER)
    for t in txs:
        w.writerow((t.date.isoformat(), t.merchant, t.category, format_amount(t.amount)))
    return buf.getvalue()


def write_csv(txs: Iterable[Transaction], path: Path) -> Path:
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(to_csv(txs), encoding="utf-8")
    tmp.replace(path)
    return path
