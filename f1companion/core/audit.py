"""Audit stamping for user-owned records.

Records carry the audit columns from ``db.base.AuditColumns``; these helpers
are the only place that writes them.
"""

from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def stamp_created(record: Any, user_id: int) -> Any:
    record.created_by = user_id
    record.created_at = utcnow()
    return record


def stamp_updated(record: Any, user_id: int | None = None) -> Any:
    record.updated_at = utcnow()
    if user_id is not None:
        record.updated_by = user_id
    return record


def stamp_deleted(record: Any, user_id: int | None = None) -> Any:
    """Soft delete: the row stays, reads filter on ``is_deleted``."""
    now = utcnow()
    record.is_deleted = True
    record.deleted_at = now
    record.updated_at = now
    if user_id is not None:
        record.deleted_by = user_id
        record.updated_by = user_id
    return record
