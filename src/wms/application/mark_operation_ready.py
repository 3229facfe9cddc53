"""Application service: Mark Operation Ready use case (Draft -> Ready)."""

from __future__ import annotations

from wms.domain.exceptions import EntityNotFoundError
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail


class MarkOperationReadyHandler:

    def __init__(self, store: LedgerStore, audit: AuditTrail | None = None) -> None:
        self._store = store
        self._audit = audit or AuditTrail(store)

    def handle(self, operation_id: str, acting_user: str) -> None:
        operation = self._store.get_operation(operation_id)
        if operation is None:
            raise EntityNotFoundError(f"Operation '{operation_id}' not found")

        operation.mark_ready()
        self._store.save_operation(operation)
        self._audit.record(
            "READY_OP", f"Marked operation {operation.reference} ready", acting_user, operation.id
        )
