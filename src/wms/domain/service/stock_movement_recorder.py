"""Domain service: Stock Movement Recorder.

Turns a quantity change into exactly one immutable, append-only ledger
entry. The recorder trusts the caller's ``balance_after``: it must be
computed from the already-updated product so that summing a product's
movements reproduces its current quantity.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from wms.domain.model.movement import MovementKind, StockMovement
from wms.domain.model.value_objects import new_id, utc_now
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.operation_processing import StockChange


class StockMovementRecorder:

    def __init__(
        self,
        store: LedgerStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory

    def record(
        self,
        product_id: str,
        delta: int,
        kind: MovementKind,
        reference: str,
        balance_after: int,
        batch_number: str | None = None,
    ) -> StockMovement:
        movement = self._build(product_id, delta, kind, reference, balance_after, batch_number)
        self._store.append_movements([movement])
        return movement

    def record_changes(self, changes: list[StockChange], reference: str) -> list[StockMovement]:
        """Record one IN/OUT movement per change in a single collection write."""
        movements = [
            self._build(
                change.product_id,
                change.delta,
                MovementKind.IN if change.delta > 0 else MovementKind.OUT,
                reference,
                change.balance_after,
                change.batch_number,
            )
            for change in changes
        ]
        self._store.append_movements(movements)
        return movements

    def _build(
        self,
        product_id: str,
        delta: int,
        kind: MovementKind,
        reference: str,
        balance_after: int,
        batch_number: str | None,
    ) -> StockMovement:
        return StockMovement(
            id=self._id_factory(),
            product_id=product_id,
            timestamp=self._clock(),
            kind=kind,
            quantity=delta,
            reference=reference,
            balance_after=balance_after,
            batch_number=batch_number,
        )
