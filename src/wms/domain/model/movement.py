"""StockMovement — one immutable ledger entry for one quantity change."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

INITIAL_INVENTORY = "Initial Inventory"
MANUAL_ADJUSTMENT = "Manual Adjustment"


class MovementKind(Enum):
    IN = "IN"
    OUT = "OUT"
    ADJUST = "ADJUST"


@dataclass(frozen=True)
class StockMovement:
    """A signed change to one product's quantity.

    ``balance_after`` is the product quantity immediately after this
    movement, so the movements of a product, replayed oldest-first from
    zero, reproduce its current quantity.
    """

    id: str
    product_id: str
    timestamp: datetime
    kind: MovementKind
    quantity: int
    reference: str
    balance_after: int
    batch_number: str | None = None
