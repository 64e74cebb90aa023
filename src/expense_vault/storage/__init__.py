from .kv_store import JsonFileKV, KeyValueStore
from .ledger import Ledger
from .ledger_store import DEFAULT_LEDGER_KEY, LedgerStore, deserialize, serialize

__all__ = [
    "KeyValueStore",
    "JsonFileKV",
    "Ledger",
    "LedgerStore",
    "DEFAULT_LEDGER_KEY",
    "serialize",
    "deserialize",
]
