"""Column mixins and serialization helpers shared by all models."""

from __future__ import annotations

from datetime import date, datetime

from utils.dates import utcnow

from . import db


def isoformat(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class TimestampMixin:
    """``created_at`` is stamped on insert, ``updated_at`` only on update."""

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=True)

    def touch(self) -> None:
        self.updated_at = utcnow()

    def _timestamps(self) -> dict:
        return {
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
