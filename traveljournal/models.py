"""Data models for the Travel Journal."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .extensions import db


class StorageSlot(db.Model):
    """One key/value slot of a browser's local storage."""

    __tablename__ = "storage_slots"
    __table_args__ = (db.UniqueConstraint("owner", "key", name="uq_storage_slots_owner_key"),)

    id = db.Column(db.Integer, primary_key=True)
    owner = db.Column(db.String(64), nullable=False, index=True)
    key = db.Column(db.String(120), nullable=False)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )


@dataclass
class Entry:
    id: int
    city: str
    date: str
    memo: str = ""
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        # Blobs written before photos existed have no "image" key.
        return cls(
            id=int(data["id"]),
            city=str(data["city"]),
            date=str(data["date"]),
            memo=str(data.get("memo") or ""),
            image=data.get("image") or None,
        )
