"""Operation aggregate — a grouped stock transaction and its lifecycle.

Lifecycle: DRAFT -> READY -> DONE, or READY -> DONE directly. DONE is
terminal; once reached, the operation and its lines never change again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from wms.domain.exceptions import ValidationError
from wms.domain.model.value_objects import Quantity, new_id


class OperationType(Enum):
    RECEIPT = "Receipt"
    DELIVERY = "Delivery"
    INTERNAL = "Internal Transfer"
    ADJUSTMENT = "Inventory Adjustment"

    @property
    def reference_prefix(self) -> str:
        return _REFERENCE_PREFIXES[self]

    @property
    def stock_sign(self) -> int:
        """+1 adds stock, -1 removes it, 0 leaves quantities untouched."""
        if self is OperationType.RECEIPT:
            return 1
        if self is OperationType.DELIVERY:
            return -1
        return 0


_REFERENCE_PREFIXES = {
    OperationType.RECEIPT: "IN",
    OperationType.DELIVERY: "OUT",
    OperationType.INTERNAL: "INT",
    OperationType.ADJUSTMENT: "ADJ",
}


class OperationStatus(Enum):
    DRAFT = "Draft"
    READY = "Ready"
    DONE = "Done"


@dataclass
class OperationLine:
    product_id: str
    quantity: Quantity
    done: int = 0
    batch_number: str | None = None


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINES = 50


@dataclass
class Operation:
    """Aggregate root for receipts, deliveries, transfers and adjustments.

    Use ``Operation.create()`` for new operations. The constructor is left
    plain so the store can reconstitute persisted operations as they are.
    """

    id: str
    reference: str
    type: OperationType
    partner: str
    items: list[OperationLine]
    status: OperationStatus = OperationStatus.DRAFT
    scheduled_date: date = field(default_factory=date.today)

    # --- Factory (used for NEW operations only) -------------------------------

    @staticmethod
    def create(
        reference: str,
        type: OperationType,
        partner: str,
        items: list[OperationLine],
        *,
        status: OperationStatus = OperationStatus.DRAFT,
        scheduled_date: date | None = None,
    ) -> Operation:
        if not reference or not reference.strip():
            raise ValidationError("Operation reference is required")
        if not items:
            raise ValidationError("Operation must contain at least one line")
        if len(items) > MAX_LINES:
            raise ValidationError(f"Maximum {MAX_LINES} lines per operation")
        if status == OperationStatus.DONE:
            raise ValidationError("Operations cannot be created as Done")

        return Operation(
            id=new_id(),
            reference=reference.strip(),
            type=type,
            partner=partner.strip(),
            items=list(items),
            status=status,
            scheduled_date=scheduled_date or date.today(),
        )

    # --- State transitions ----------------------------------------------------

    @property
    def is_done(self) -> bool:
        return self.status == OperationStatus.DONE

    def mark_ready(self) -> None:
        """Transition DRAFT -> READY."""
        if self.status != OperationStatus.DRAFT:
            raise ValidationError(
                f"Cannot mark operation {self.reference} ready — current "
                f"status is {self.status.value}, expected Draft"
            )
        self.status = OperationStatus.READY

    def complete(self) -> None:
        """Transition DRAFT|READY -> DONE and record every line as fulfilled.

        Stock must already have been validated against the current product
        snapshot (see ``plan_processing``).
        """
        if self.is_done:
            raise ValidationError(f"Operation {self.reference} is already done")
        for line in self.items:
            line.done = line.quantity.value
        self.status = OperationStatus.DONE

    # --- Computed properties --------------------------------------------------

    def requested_by_product(self) -> dict[str, int]:
        """Total requested quantity per product, in first-seen order."""
        totals: dict[str, int] = {}
        for line in self.items:
            totals[line.product_id] = totals.get(line.product_id, 0) + line.quantity.value
        return totals
