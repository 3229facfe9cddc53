"""Application service: Reset Ledger use case.

Administrative action: discards products, operations, movements and audit
logs, and seeds them again. There is no schema version, so this is also
the only migration path after a storage format change.
"""

from __future__ import annotations

import structlog

from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail

logger = structlog.get_logger(__name__)


class ResetLedgerHandler:

    def __init__(self, store: LedgerStore, audit: AuditTrail | None = None) -> None:
        self._store = store
        self._audit = audit or AuditTrail(store)

    def handle(self, acting_user: str) -> None:
        self._store.reset()
        logger.warning("Ledger reset", user=acting_user)
        self._audit.record("RESET", "Reset all ledger collections", acting_user)
