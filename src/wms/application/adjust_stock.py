"""Application service: Adjust Stock use case.

Sets a product's counted on-hand quantity. This is a product edit that
only touches the quantity, so it shares the ADJUST movement path.
"""

from __future__ import annotations

from wms.application.dto import ProductDTO
from wms.application.update_product import ProductChanges, UpdateProductHandler
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.stock_movement_recorder import StockMovementRecorder


class AdjustStockHandler:

    def __init__(
        self,
        store: LedgerStore,
        recorder: StockMovementRecorder | None = None,
        audit: AuditTrail | None = None,
    ) -> None:
        self._store = store
        self._update = UpdateProductHandler(store, recorder, audit)

    def handle(self, sku: str, quantity: int, acting_user: str) -> ProductDTO:
        product = self._store.get_product_by_sku(sku)
        if product is None:
            raise EntityNotFoundError(f"Product not found: SKU '{sku}'")
        return self._update.handle(product.id, ProductChanges(quantity=quantity), acting_user)
