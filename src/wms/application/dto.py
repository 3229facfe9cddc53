"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from wms.domain.model.audit import AuditLog
from wms.domain.model.movement import StockMovement
from wms.domain.model.operation import Operation
from wms.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


# --- Input -------------------------------------------------------------------


@dataclass(frozen=True)
class ProductSpec:
    """Input: fields of a new product as entered by the user."""

    sku: str
    name: str
    quantity: int = 0
    category: str = "Uncategorized"
    unit: str = "pcs"
    location: str = ""
    price: str = "0"
    cost: str = "0"
    supplier: str = ""
    min_level: int = 0


@dataclass(frozen=True)
class OperationLineSpec:
    """Input: one line of a new operation (product SKU + quantity)."""

    sku: str
    quantity: int
    batch_number: str | None = None


# --- Output ------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    sku: str
    name: str
    category: str
    quantity: int
    unit: str
    location: str
    price: str  # formatted, e.g. "$29.99"
    cost: str
    supplier: str
    min_level: int
    status: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            sku=product.sku,
            name=product.name,
            category=product.category,
            quantity=product.quantity,
            unit=product.unit,
            location=product.location,
            price=str(product.price),
            cost=str(product.cost),
            supplier=product.supplier,
            min_level=product.min_level,
            status=product.stock_status.value,
        )


@dataclass(frozen=True)
class OperationLineDTO:
    product_id: str
    product_name: str
    quantity: int
    done: int
    batch_number: str | None


@dataclass(frozen=True)
class OperationDTO:
    id: str
    reference: str
    type: str
    partner: str
    status: str
    scheduled_date: str
    items: list[OperationLineDTO]

    @staticmethod
    def from_domain(operation: Operation, names: dict[str, str]) -> OperationDTO:
        """``names`` maps product id to name; unknown ids display as '?'."""
        return OperationDTO(
            id=operation.id,
            reference=operation.reference,
            type=operation.type.value,
            partner=operation.partner,
            status=operation.status.value,
            scheduled_date=operation.scheduled_date.isoformat(),
            items=[
                OperationLineDTO(
                    product_id=line.product_id,
                    product_name=names.get(line.product_id, "?"),
                    quantity=line.quantity.value,
                    done=line.done,
                    batch_number=line.batch_number,
                )
                for line in operation.items
            ],
        )


@dataclass(frozen=True)
class MovementDTO:
    product_id: str
    timestamp: str
    kind: str
    quantity: int
    reference: str
    balance_after: int
    batch_number: str | None

    @staticmethod
    def from_domain(movement: StockMovement) -> MovementDTO:
        return MovementDTO(
            product_id=movement.product_id,
            timestamp=movement.timestamp.strftime(TIMESTAMP_FORMAT),
            kind=movement.kind.value,
            quantity=movement.quantity,
            reference=movement.reference,
            balance_after=movement.balance_after,
            batch_number=movement.batch_number,
        )


@dataclass(frozen=True)
class AuditLogDTO:
    action: str
    details: str
    user: str
    timestamp: str
    entity_id: str | None

    @staticmethod
    def from_domain(log: AuditLog) -> AuditLogDTO:
        return AuditLogDTO(
            action=log.action,
            details=log.details,
            user=log.user,
            timestamp=log.timestamp.strftime(TIMESTAMP_FORMAT),
            entity_id=log.entity_id,
        )


@dataclass(frozen=True)
class DashboardDTO:
    total_products: int
    out_of_stock: int
    low_stock: int  # includes out-of-stock products
    pending_receipts: int
    pending_deliveries: int
    inventory_value: str
