"""Application service: Update Product use case.

Editing a product is also the manual-adjustment path: when the quantity
changes, one ADJUST movement carrying the difference is recorded. An edit
that leaves the quantity alone records no movement.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from wms.application.dto import ProductDTO
from wms.domain.exceptions import (
    EntityNotFoundError,
    LedgerInconsistencyError,
    PersistenceUnavailableError,
    ValidationError,
)
from wms.domain.model.movement import MANUAL_ADJUSTMENT, MovementKind
from wms.domain.model.value_objects import Money
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.stock_movement_recorder import StockMovementRecorder

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProductChanges:
    """Input: only the fields that are not None are changed."""

    sku: str | None = None
    name: str | None = None
    quantity: int | None = None
    category: str | None = None
    unit: str | None = None
    location: str | None = None
    price: str | None = None
    cost: str | None = None
    supplier: str | None = None
    min_level: int | None = None


class UpdateProductHandler:

    def __init__(
        self,
        store: LedgerStore,
        recorder: StockMovementRecorder | None = None,
        audit: AuditTrail | None = None,
    ) -> None:
        self._store = store
        self._recorder = recorder or StockMovementRecorder(store)
        self._audit = audit or AuditTrail(store)

    def handle(self, product_id: str, changes: ProductChanges, acting_user: str) -> ProductDTO:
        product = self._store.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if changes.sku is not None and changes.sku.strip().lower() != product.sku.lower():
            if not changes.sku.strip():
                raise ValidationError("Product SKU is required")
            if self._store.get_product_by_sku(changes.sku) is not None:
                raise ValidationError(f"SKU '{changes.sku.strip()}' already exists")
            product.sku = changes.sku.strip()
        if changes.name is not None:
            if not changes.name.strip():
                raise ValidationError("Product name is required")
            product.name = changes.name.strip()
        if changes.min_level is not None:
            if changes.min_level < 0:
                raise ValidationError("Minimum level cannot be negative")
            product.min_level = changes.min_level
        if changes.price is not None:
            product.price = Money.of(changes.price)
        if changes.cost is not None:
            product.cost = Money.of(changes.cost)
        for attr in ("category", "unit", "location", "supplier"):
            value = getattr(changes, attr)
            if value is not None:
                setattr(product, attr, value)

        delta = 0
        if changes.quantity is not None:
            delta = product.set_quantity(changes.quantity)

        self._store.save_product(product)

        try:
            if delta != 0:
                self._recorder.record(
                    product_id=product.id,
                    delta=delta,
                    kind=MovementKind.ADJUST,
                    reference=MANUAL_ADJUSTMENT,
                    balance_after=product.quantity,
                )
            self._audit.record("UPDATE", f"Updated product: {product.name}", acting_user, product.id)
        except PersistenceUnavailableError as exc:
            logger.error("Ledger left inconsistent after product edit", sku=product.sku, error=str(exc))
            raise LedgerInconsistencyError(
                f"Product {product.sku} was saved but its movement or audit entry "
                f"could not be written: {exc}"
            ) from exc
        return ProductDTO.from_domain(product)
