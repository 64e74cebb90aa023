from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..categories import ALERT_METHOD, DEFAULT_CATEGORY, normalize_category
from ..errors import StorageWriteError
from ..models import Transaction, major_to_minor, minor_to_major
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_LEDGER_KEY = "vault_ledger"


class StoredTransaction(BaseModel):
    """Wire shape of one ledger entry inside the persisted JSON array."""

    model_config = ConfigDict(extra="ignore")

    id: str
    amount: float = Field(ge=0)
    merchant: str
    category: str
    method: str = ALERT_METHOD
    date: datetime
    isCredit: bool = False


def to_wire(t: Transaction) -> dict[str, Any]:
    return {
        "id": t.id,
        "amount": minor_to_major(t.amount),
        "merchant": t.merchant,
        "category": t.category,
        "method": t.method,
        "date": t.date.isoformat(),
        "isCredit": t.is_credit,
    }


def from_wire(item: StoredTransaction) -> Transaction:
    category = normalize_category(item.category)
    if category is None:
        logger.warning("Unknown category %r for tx=%s, using %s", item.category, item.id, DEFAULT_CATEGORY)
        category = DEFAULT_CATEGORY
    return Transaction(
        id=item.id,
        amount=major_to_minor(item.amount),
        merchant=item.merchant,
        category=category,
        method=item.method,
        date=item.date,
        is_credit=item.isCredit,
    )


def serialize(transactions: Iterable[Transaction]) -> str:
    return json.dumps([to_wire(t) for t in transactions], ensure_ascii=False)


def deserialize(raw: str) -> list[Transaction]:
    """
    Parse a persisted blob. A corrupt blob yields an empty list; single
    entries that fail validation are dropped.
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning("Ledger blob is not valid JSON, starting empty: %s", e)
        return []

    if not isinstance(data, list):
        logger.warning("Ledger blob is %s, expected a list; starting empty", type(data).__name__)
        return []

    out: list[Transaction] = []
    for obj in data:
        try:
            out.append(from_wire(StoredTransaction.model_validate(obj)))
        except (ValidationError, ValueError) as e:
            logger.warning("Skipping invalid ledger entry: %s", e)
    return out


class LedgerStore:
    """
    Whole-ledger persistence under a single key:

      <key> -> JSON array of transactions, most recent first

    Every save overwrites the full array; there is no append log.
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_LEDGER_KEY):
        self.kv = kv
        self.key = key

    def load(self) -> list[Transaction]:
        try:
            raw = self.kv.get(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Ledger read failed, starting empty: %s", e)
            return []
        if raw is None:
            return []
        return deserialize(raw)

    def save_all(self, transactions: Iterable[Transaction]) -> None:
        try:
            blob = serialize(transactions)
            self.kv.set(self.key, blob)
        except (OSError, TypeError, ValueError) as e:
            raise StorageWriteError(f"Failed to save ledger under {self.key!r}: {e}") from e
