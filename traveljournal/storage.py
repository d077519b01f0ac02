"""Key/value storage backends with a browser ``localStorage`` interface."""
from __future__ import annotations

from typing import Dict, Optional, Protocol

from .extensions import db
from .models import StorageSlot


class Storage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage, handy for tests and one-off tooling."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class SlotStorage:
    """Storage slots owned by one browser, persisted through SQLAlchemy.

    Every ``set_item`` is committed on its own so a write is visible as a
    whole or not at all.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner

    def _slot(self, key: str) -> Optional[StorageSlot]:
        return StorageSlot.query.filter_by(owner=self.owner, key=key).first()

    def get_item(self, key: str) -> Optional[str]:
        slot = self._slot(key)
        return slot.value if slot else None

    def set_item(self, key: str, value: str) -> None:
        slot = self._slot(key)
        if slot is None:
            slot = StorageSlot(owner=self.owner, key=key, value=value)
            db.session.add(slot)
        else:
            slot.value = value
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
