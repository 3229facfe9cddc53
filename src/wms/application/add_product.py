"""Application service: Add Product use case.

A new product's starting quantity enters the ledger as one IN movement
referenced "Initial Inventory", so its movement history is complete from
the first record.
"""

from __future__ import annotations

import structlog

from wms.application.dto import ProductDTO, ProductSpec
from wms.domain.exceptions import (
    LedgerInconsistencyError,
    PersistenceUnavailableError,
    ValidationError,
)
from wms.domain.model.movement import INITIAL_INVENTORY, MovementKind
from wms.domain.model.product import Product
from wms.domain.model.value_objects import Money
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.stock_movement_recorder import StockMovementRecorder

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        store: LedgerStore,
        recorder: StockMovementRecorder | None = None,
        audit: AuditTrail | None = None,
    ) -> None:
        self._store = store
        self._recorder = recorder or StockMovementRecorder(store)
        self._audit = audit or AuditTrail(store)

    def handle(self, spec: ProductSpec, acting_user: str) -> ProductDTO:
        if spec.sku and self._store.get_product_by_sku(spec.sku) is not None:
            raise ValidationError(f"SKU '{spec.sku.strip()}' already exists")

        product = Product.create(
            sku=spec.sku,
            name=spec.name,
            quantity=spec.quantity,
            category=spec.category,
            unit=spec.unit,
            location=spec.location,
            price=Money.of(spec.price),
            cost=Money.of(spec.cost),
            supplier=spec.supplier,
            min_level=spec.min_level,
        )
        self._store.save_product(product)

        try:
            self._recorder.record(
                product_id=product.id,
                delta=product.quantity,
                kind=MovementKind.IN,
                reference=INITIAL_INVENTORY,
                balance_after=product.quantity,
            )
            self._audit.record("CREATE", f"Created product: {product.name}", acting_user, product.id)
        except PersistenceUnavailableError as exc:
            logger.error("Ledger left inconsistent after adding product", sku=product.sku, error=str(exc))
            raise LedgerInconsistencyError(
                f"Product {product.sku} was saved but its initial movement or audit "
                f"entry could not be written: {exc}"
            ) from exc
        return ProductDTO.from_domain(product)
