from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .analytics.views import LedgerView
from .ingest.engine import IngestEngine
from .storage.kv_store import JsonFileKV, KeyValueStore
from .storage.ledger import Ledger
from .storage.ledger_store import DEFAULT_LEDGER_KEY, LedgerStore


@dataclass(frozen=True)
class Vault:
    """Wiring built once at startup and handed to every consumer."""

    ledger: Ledger
    engine: IngestEngine
    view: LedgerView


def open_vault(kv: KeyValueStore, key: str = DEFAULT_LEDGER_KEY) -> Vault:
    ledger = Ledger(LedgerStore(kv, key))
    ledger.load()
    return Vault(ledger=ledger, engine=IngestEngine(ledger), view=LedgerView(ledger))


def open_file_vault(data_dir: Path, key: str = DEFAULT_LEDGER_KEY) -> Vault:
    return open_vault(JsonFileKV(data_dir), key)
