"""AuditLog — an attributable human action, kept apart from stock movements."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

AUDIT_LOG_RETENTION = 100


@dataclass(frozen=True)
class AuditLog:
    id: str
    action: str
    details: str
    user: str
    timestamp: datetime
    entity_id: str | None = None
