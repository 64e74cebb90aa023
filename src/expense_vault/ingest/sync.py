from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .engine import IngestEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    scanned: int
    admitted: int
    duplicates: int
    unparseable: int


def sync_history(engine: IngestEngine, messages: Iterable[tuple[str, str]]) -> SyncResult:
    """
    Replay a batch of (body, source_id) messages into the ledger:
    - each message is parsed and admitted silently (no per-item save)
    - one save_all() after the whole batch
    Safe to call repeatedly with the same history: ids dedupe.
    """
    scanned = admitted = duplicates = unparseable = 0

    with engine.ledger.lock:
        for body, source_id in messages:
            scanned += 1
            outcome = engine.process_message(body, source_id, silent=True)
            if outcome == "admitted":
                admitted += 1
            elif outcome == "duplicate":
                duplicates += 1
            else:
                unparseable += 1

        engine.ledger.save_all()

    logger.info(
        "History sync: scanned=%s admitted=%s duplicates=%s unparseable=%s",
        scanned,
        admitted,
        duplicates,
        unparseable,
    )
    return SyncResult(scanned=scanned, admitted=admitted, duplicates=duplicates, unparseable=unparseable)
