"""Application service: Process Operation use case.

Orchestrates the processing plan (pure validation and computation), the
ledger store (operation + products written as one logical unit), the
movement recorder and the audit trail.

Ordering matters:
  1. Read the latest operations and products.
  2. Plan against that snapshot. Any refusal returns before a write.
  3. Apply {operation, products}.
  4. Append one movement per affected line in a single write.
  5. Record one audit entry for the whole operation.

The store has no rollback. Any failure after the operation was written
in step 3 leaves the ledger inconsistent; that is raised as
LedgerInconsistencyError rather than retried.
"""

from __future__ import annotations

import structlog

from wms.domain.exceptions import LedgerInconsistencyError, PersistenceUnavailableError
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.operation_processing import (
    ProcessingOutcome,
    ProcessingResult,
    plan_processing,
)
from wms.domain.service.stock_movement_recorder import StockMovementRecorder

logger = structlog.get_logger(__name__)


class ProcessOperationHandler:

    def __init__(
        self,
        store: LedgerStore,
        recorder: StockMovementRecorder | None = None,
        audit: AuditTrail | None = None,
    ) -> None:
        self._store = store
        self._recorder = recorder or StockMovementRecorder(store)
        self._audit = audit or AuditTrail(store)

    def handle(self, operation_id: str, acting_user: str) -> ProcessingResult:
        operation = self._store.get_operation(operation_id)
        products = self._store.get_products()

        result = plan_processing(operation, products, operation_id=operation_id)

        if result.outcome != ProcessingOutcome.PROCESSED:
            logger.info(
                "Operation not processed",
                operation_id=operation_id,
                outcome=result.outcome.value,
                shortage=result.shortage.product_id if result.shortage else None,
                missing_id=result.missing_id,
            )
            return result

        done = result.operation
        try:
            self._store.apply(done, result.products)
        except LedgerInconsistencyError as exc:
            _log_inconsistency(done.reference, exc)
            raise

        try:
            self._recorder.record_changes(result.changes, reference=done.reference)
            self._audit.record(
                "PROCESS_OP", f"Processed operation {done.reference}", acting_user, done.id
            )
        except PersistenceUnavailableError as exc:
            _log_inconsistency(done.reference, exc)
            raise LedgerInconsistencyError(
                f"Operation {done.reference} was applied but its movements or "
                f"audit entry could not be written: {exc}"
            ) from exc

        logger.info(
            "Operation processed",
            reference=done.reference,
            type=done.type.value,
            movements=len(result.changes),
        )
        return result


def _log_inconsistency(reference: str, exc: Exception) -> None:
    logger.error("Ledger left inconsistent after processing", reference=reference, error=str(exc))
