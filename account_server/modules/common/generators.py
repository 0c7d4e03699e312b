"""Transaction identifier and timestamp sources."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def generate_transaction_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to naive timestamps; SQLite drops the offset on read."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
