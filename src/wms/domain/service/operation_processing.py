"""Domain service: Operation processing.

``plan_processing`` is the state-transition function for taking an
operation to DONE. It works purely on a read snapshot and never mutates
its inputs; the caller writes the returned operation and product set as
one logical unit, then records the returned stock changes.

The two-phase approach (validate-then-compute) guarantees that a refused
operation leaves quantities, status and movement history untouched.
"""

from __future__ import annotations

import copy
import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from wms.domain.exceptions import EntityNotFoundError, InsufficientStockError
from wms.domain.model.operation import Operation, OperationType
from wms.domain.model.product import Product


class ProcessingOutcome(Enum):
    PROCESSED = "processed"
    ALREADY_DONE = "already_done"
    INSUFFICIENT_STOCK = "insufficient_stock"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StockChange:
    """One line's effect on one product, with the balance it leaves."""

    product_id: str
    delta: int
    balance_after: int
    batch_number: str | None = None


@dataclass(frozen=True)
class Shortage:
    product_id: str
    product_name: str | None
    requested: int
    available: int


@dataclass(frozen=True)
class ProcessingResult:
    outcome: ProcessingOutcome
    operation: Operation | None = None
    products: list[Product] = field(default_factory=list)
    changes: list[StockChange] = field(default_factory=list)
    shortage: Shortage | None = None
    missing_id: str | None = None

    @property
    def ok(self) -> bool:
        """True for both a fresh transition and an idempotent repeat."""
        return self.outcome in (ProcessingOutcome.PROCESSED, ProcessingOutcome.ALREADY_DONE)

    def raise_for_outcome(self) -> None:
        if self.outcome == ProcessingOutcome.NOT_FOUND:
            raise EntityNotFoundError(f"Not found: '{self.missing_id}'")
        if self.outcome == ProcessingOutcome.INSUFFICIENT_STOCK:
            s = self.shortage
            raise InsufficientStockError(s.product_id, s.product_name, s.requested, s.available)


def plan_processing(
    operation: Operation | None,
    products: list[Product],
    operation_id: str | None = None,
) -> ProcessingResult:
    """Decide what processing ``operation`` against ``products`` would do.

    Receipts add each line quantity and deliveries subtract it. Internal
    transfers and inventory adjustments move no stock: they only reach
    DONE. Delivery quantities are summed per product before the check so
    several lines cannot jointly overdraw one product.
    """
    if operation is None:
        return ProcessingResult(ProcessingOutcome.NOT_FOUND, missing_id=operation_id)
    if operation.is_done:
        return ProcessingResult(ProcessingOutcome.ALREADY_DONE, operation=operation)

    by_id = {p.id: p for p in products}
    sign = operation.type.stock_sign

    # Phase 1: validate against the snapshot
    if sign != 0:
        for product_id, requested in operation.requested_by_product().items():
            product = by_id.get(product_id)
            if operation.type == OperationType.DELIVERY:
                available = product.quantity if product else 0
                if product is None or available < requested:
                    return ProcessingResult(
                        ProcessingOutcome.INSUFFICIENT_STOCK,
                        operation=operation,
                        shortage=Shortage(
                            product_id=product_id,
                            product_name=product.name if product else None,
                            requested=requested,
                            available=available,
                        ),
                    )
            elif product is None:
                return ProcessingResult(
                    ProcessingOutcome.NOT_FOUND, operation=operation, missing_id=product_id
                )

    # Phase 2: compute new quantities on copies
    updated = {pid: dataclasses.replace(p) for pid, p in by_id.items()}
    changes: list[StockChange] = []
    if sign != 0:
        for line in operation.items:
            product = updated[line.product_id]
            delta = sign * line.quantity.value
            product.quantity += delta
            changes.append(
                StockChange(
                    product_id=product.id,
                    delta=delta,
                    balance_after=product.quantity,
                    batch_number=line.batch_number,
                )
            )

    done = copy.deepcopy(operation)
    done.complete()

    return ProcessingResult(
        ProcessingOutcome.PROCESSED,
        operation=done,
        products=[updated[p.id] for p in products],
        changes=changes,
    )
