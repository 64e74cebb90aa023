from .engine import IngestEngine, IngestOutcome
from .source import JsonFileMessageSource, MessageSource, attach_live_source, sync_from_source
from .sync import SyncResult, sync_history

__all__ = [
    "IngestEngine",
    "IngestOutcome",
    "SyncResult",
    "sync_history",
    "MessageSource",
    "JsonFileMessageSource",
    "attach_live_source",
    "sync_from_source",
]
