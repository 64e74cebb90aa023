from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Iterable, Protocol

from ..errors import PermissionDeniedError
from .engine import IngestEngine
from .sync import SyncResult, sync_history

logger = logging.getLogger(__name__)

MessageCallback = Callable[[str, str], object]


class MessageSource(Protocol):
    def history(self) -> Iterable[tuple[str, str]]: ...

    def subscribe(self, callback: MessageCallback) -> None: ...


class JsonFileMessageSource:
    """
    Messages exported to disk, either a JSON array or JSON Lines:

      {"body": "Rs. 250 debited at Swiggy", "id": "1700000000000"}

    "date" is accepted in place of "id". A missing file is reported as
    PermissionDeniedError, same as a refused inbox.
    """

    def __init__(self, path: Path):
        self.path = path
        self._subscribers: list[MessageCallback] = []

    def _read_items(self) -> list[dict]:
        if not self.path.exists():
            raise PermissionDeniedError(f"Message source not available: {self.path}")

        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Message file %s is not UTF-8, nothing to read", self.path)
            return []

        stripped = text.lstrip()
        if stripped.startswith("["):
            try:
                data = json.loads(stripped)
            except ValueError:
                logger.warning("Message file %s is not a valid JSON array, nothing to read", self.path)
                return []
            if not isinstance(data, list):
                return []
            return [x for x in data if isinstance(x, dict)]

        items: list[dict] = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except ValueError:
                logger.warning("Skipping malformed message line in %s", self.path)
                continue
            if isinstance(obj, dict):
                items.append(obj)
        return items

    def history(self) -> list[tuple[str, str]]:
        out: list[tuple[str, str]] = []
        for obj in self._read_items():
            sid = obj.get("id", obj.get("date"))
            out.append((str(obj.get("body") or ""), "" if sid is None else str(sid)))
        return out

    def subscribe(self, callback: MessageCallback) -> None:
        self._subscribers.append(callback)

    def poll(self) -> int:
        """Deliver every message in the file to subscribers. Returns count delivered."""
        messages = self.history()
        for body, sid in messages:
            for cb in self._subscribers:
                cb(body, sid)
        return len(messages)


def attach_live_source(engine: IngestEngine, source: MessageSource) -> bool:
    """
    Route pushed messages into the engine. Returns False (manual-entry-only
    mode) if the source refuses access.
    """
    try:
        source.subscribe(engine.process_message)
    except PermissionDeniedError as e:
        logger.warning("Message source unavailable, manual entry only: %s", e)
        return False
    return True


def sync_from_source(engine: IngestEngine, source: MessageSource) -> SyncResult | None:
    try:
        messages = list(source.history())
    except PermissionDeniedError as e:
        logger.warning("Message history unavailable, skipping sync: %s", e)
        return None
    return sync_history(engine, messages)
