"""Domain service: Audit Trail.

Append-only log of who did what. Newest entries go first and anything
beyond ``AUDIT_LOG_RETENTION`` is evicted, oldest first. Action and
details are free text and are not validated.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from wms.domain.model.audit import AUDIT_LOG_RETENTION, AuditLog
from wms.domain.model.value_objects import new_id, utc_now
from wms.domain.repository.ledger_store import LedgerStore


class AuditTrail:

    def __init__(
        self,
        store: LedgerStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory

    def record(
        self,
        action: str,
        details: str,
        acting_user: str,
        entity_id: str | None = None,
    ) -> AuditLog:
        entry = AuditLog(
            id=self._id_factory(),
            action=action,
            details=details,
            user=acting_user,
            timestamp=self._clock(),
            entity_id=entity_id,
        )
        logs = self._store.get_audit_logs()
        logs.insert(0, entry)
        self._store.put_audit_logs(logs[:AUDIT_LOG_RETENTION])
        return entry

    def entries(self) -> list[AuditLog]:
        return self._store.get_audit_logs()
