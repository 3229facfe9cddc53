"""Application service: Delete Product use case.

Deletion emits no stock movement; the audit entry is the only record.
Existing movements of the product stay in the ledger.
"""

from __future__ import annotations

from wms.domain.exceptions import EntityNotFoundError, ValidationError
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail


class DeleteProductHandler:

    def __init__(self, store: LedgerStore, audit: AuditTrail | None = None) -> None:
        self._store = store
        self._audit = audit or AuditTrail(store)

    def handle(self, product_id: str, acting_user: str) -> None:
        removed = self._store.remove_products({product_id})
        if not removed:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._audit.record("DELETE", f"Deleted product: {removed[0].name}", acting_user, product_id)

    def handle_bulk(self, product_ids: list[str], acting_user: str) -> int:
        """Delete several products with a single audit entry."""
        if not product_ids:
            raise ValidationError("No products selected")
        removed = self._store.remove_products(set(product_ids))
        if not removed:
            raise EntityNotFoundError("None of the selected products exist")
        self._audit.record("BULK_DELETE", f"Deleted {len(removed)} products", acting_user)
        return len(removed)
