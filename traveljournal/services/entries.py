"""Service helpers for reading and writing the persisted entry collection."""
from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional

from ..errors import MalformedPersistedData
from ..extensions import db
from ..models import Entry
from ..storage import Storage

logger = logging.getLogger(__name__)


def parse_entries(raw: str) -> List[Entry]:
    """Deserialize a persisted blob, raising ``MalformedPersistedData``."""
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise MalformedPersistedData(f"invalid JSON: {exc}") from None
    if not isinstance(payload, list):
        raise MalformedPersistedData(f"expected a list, got {type(payload).__name__}")
    try:
        return [Entry.from_dict(item) for item in payload]
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise MalformedPersistedData(f"bad entry: {exc!r}") from None


def dump_entries(entries: Iterable[Entry]) -> str:
    return json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)


class EntryStore:
    """The persisted collection under one fixed storage key."""

    def __init__(self, storage: Storage, key: str = "travelEntries") -> None:
        self.storage = storage
        self.key = key
        self.warning: Optional[MalformedPersistedData] = None

    def load(self) -> List[Entry]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            return parse_entries(raw)
        except MalformedPersistedData as exc:
            logger.warning("Ignoring malformed %r slot: %s", self.key, exc.detail)
            self.warning = exc
            return []

    def save(self, entries: Iterable[Entry]) -> None:
        self.storage.set_item(self.key, dump_entries(entries))

    def add(self, entry: Entry) -> None:
        entries = self.load()
        entries.append(entry)
        self.save(entries)

    def remove(self, entry_id: int) -> bool:
        entries = self.load()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self.save(remaining)
        return True

    def next_id(self, now_ms: int) -> int:
        """Millisecond timestamp, bumped past the newest stored id on collision."""
        entries = self.load()
        if entries:
            newest = max(entry.id for entry in entries)
            if now_ms <= newest:
                return newest + 1
        return now_ms

    def raw(self) -> str:
        return self.storage.get_item(self.key) or "[]"


def setup_database(app) -> None:
    with app.app_context():
        db.create_all()
        app.logger.debug("Storage tables ready on %s", db.engine.url.render_as_string())
