from __future__ import annotations

import logging
import threading
from typing import Iterator

from ..errors import DuplicateIdError
from ..models import Transaction
from .ledger_store import LedgerStore

logger = logging.getLogger(__name__)


class Ledger:
    """
    Authoritative in-memory list of transactions, most recent first.

    Mutations persist through the injected LedgerStore before returning,
    unless called with silent=True; the caller of a silent batch owns the
    final save_all(). A failed save leaves the in-memory change in place
    and re-raises StorageWriteError.
    """

    def __init__(self, store: LedgerStore):
        self.store = store
        self.lock = threading.RLock()
        self._items: list[Transaction] = []
        self._ids: set[str] = set()
        self.dirty = False

    def load(self) -> list[Transaction]:
        items = self.store.load()
        with self.lock:
            self._items = []
            self._ids = set()
            for t in items:
                if t.id in self._ids:
                    logger.warning("Dropping duplicate id=%s found in stored ledger", t.id)
                    continue
                self._items.append(t)
                self._ids.add(t.id)
            self.dirty = False
            logger.info("Ledger loaded: %s transactions", len(self._items))
            return list(self._items)

    def save_all(self) -> None:
        with self.lock:
            self.store.save_all(self._items)
            self.dirty = False

    def _flush(self, silent: bool) -> None:
        self.dirty = True
        if not silent:
            self.save_all()

    def insert_front(self, t: Transaction, *, silent: bool = False) -> None:
        with self.lock:
            if t.id in self._ids:
                raise DuplicateIdError(t.id)
            self._items.insert(0, t)
            self._ids.add(t.id)
            self._flush(silent)

    def remove_by_id(self, tx_id: str, *, silent: bool = False) -> bool:
        with self.lock:
            if tx_id not in self._ids:
                return False
            self._items = [t for t in self._items if t.id != tx_id]
            self._ids.discard(tx_id)
            self._flush(silent)
            return True

    def contains(self, tx_id: str) -> bool:
        with self.lock:
            return tx_id in self._ids

    def get(self, tx_id: str) -> Transaction | None:
        with self.lock:
            for t in self._items:
                if t.id == tx_id:
                    return t
        return None

    def snapshot(self) -> list[Transaction]:
        with self.lock:
            return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())
