"""Application services: movement history and audit log (queries)."""

from __future__ import annotations

from wms.application.dto import AuditLogDTO, MovementDTO
from wms.domain.repository.ledger_store import LedgerStore


class ShowMovementsHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, product_id: str | None = None) -> list[MovementDTO]:
        """Newest first; restricted to one product when ``product_id`` is set."""
        return [
            MovementDTO.from_domain(m)
            for m in self._store.get_movements()
            if product_id is None or m.product_id == product_id
        ]


class ShowAuditLogHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, limit: int | None = None) -> list[AuditLogDTO]:
        logs = self._store.get_audit_logs()
        if limit is not None:
            logs = logs[:limit]
        return [AuditLogDTO.from_domain(log) for log in logs]
