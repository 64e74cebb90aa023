from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Literal

from ..categories import INCOME_CATEGORY, default_category, normalize_category
from ..errors import InvalidEntryError
from ..models import CandidateTransaction, Transaction, major_to_minor, title_case
from ..parsing import parse
from ..storage.ledger import Ledger

logger = logging.getLogger(__name__)

IngestOutcome = Literal["admitted", "duplicate", "unparsed"]


def local_now() -> datetime:
    return datetime.now().astimezone()


class IngestEngine:
    """
    Single write path into the Ledger for both message-derived and manual
    transactions. Message-derived entries are keyed by their source id,
    so redelivery of the same message is a no-op.
    """

    def __init__(self, ledger: Ledger, clock: Callable[[], datetime] = local_now):
        self.ledger = ledger
        self.clock = clock

    def ingest(self, candidate: CandidateTransaction, source_id: str, silent: bool = False) -> bool:
        """
        Admit candidate under source_id. Returns False when the id is
        already in the ledger or is empty.
        """
        sid = str(source_id or "").strip()
        if not sid:
            logger.warning("Candidate without source id not admitted")
            return False

        with self.ledger.lock:
            if self.ledger.contains(sid):
                logger.debug("Skip duplicate message id=%s", sid)
                return False

            t = Transaction(
                id=sid,
                amount=candidate.amount,
                merchant=title_case(candidate.merchant_hint),
                category=default_category(candidate.is_credit),
                method=candidate.method_hint,
                date=self.clock(),
                is_credit=candidate.is_credit,
            )
            self.ledger.insert_front(t, silent=silent)

        logger.debug("Admitted message id=%s amount=%s credit=%s", sid, t.amount, t.is_credit)
        return True

    def process_message(self, body: str, source_id: str, silent: bool = False) -> IngestOutcome:
        if not str(source_id or "").strip():
            logger.warning("Message without source id ignored")
            return "unparsed"
        candidate = parse(body or "")
        if candidate is None:
            return "unparsed"
        return "admitted" if self.ingest(candidate, source_id, silent=silent) else "duplicate"

    def _new_manual_id(self, now: datetime) -> str:
        ms = int(now.timestamp() * 1000)
        while self.ledger.contains(str(ms)):
            ms += 1
        return str(ms)

    def add_entry(
        self,
        amount: Decimal | int | float | str,
        merchant: str,
        category: str,
        method: str,
        is_credit: bool | None = None,
        date: datetime | None = None,
    ) -> Transaction:
        """
        Manual entry. Bypasses dedup and always persists immediately.

        amount is in major units (rupees). is_credit defaults to
        category == "Income".
        """
        try:
            minor = major_to_minor(amount)
        except ValueError as e:
            raise InvalidEntryError(f"Invalid amount: {amount!r}") from e
        if minor < 0:
            raise InvalidEntryError(f"Amount must be non-negative, got {amount!r}")

        cat = normalize_category(category)
        if cat is None:
            raise InvalidEntryError(f"Unknown category: {category!r}")

        if is_credit is None:
            is_credit = cat == INCOME_CATEGORY

        with self.ledger.lock:
            now = self.clock()
            t = Transaction(
                id=self._new_manual_id(now),
                amount=minor,
                merchant=title_case((merchant or "").strip()),
                category=cat,
                method=(method or "").strip() or "Cash",
                date=date or now,
                is_credit=is_credit,
            )
            self.ledger.insert_front(t)

        logger.info("Manual entry id=%s amount=%s category=%s", t.id, t.amount, t.category)
        return t

    def delete_transaction(self, tx_id: str) -> bool:
        removed = self.ledger.remove_by_id(tx_id)
        if removed:
            logger.info("Deleted transaction id=%s", tx_id)
        return removed
