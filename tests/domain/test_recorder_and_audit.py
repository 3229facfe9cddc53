"""Unit tests for the movement recorder, audit trail and reference sequence."""

from wms.domain.model.audit import AUDIT_LOG_RETENTION
from wms.domain.model.movement import MovementKind
from wms.domain.model.operation import (
    Operation,
    OperationLine,
    OperationType,
)
from wms.domain.model.value_objects import Quantity
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.operation_processing import StockChange
from wms.domain.service.operation_references import next_reference
from wms.domain.service.stock_movement_recorder import StockMovementRecorder
from tests.fakes import InMemoryLedgerStore, StepClock


class TestStockMovementRecorder:

    def test_record_appends_one_movement(self):
        store = InMemoryLedgerStore()
        recorder = StockMovementRecorder(store, clock=StepClock())

        m = recorder.record("p1", 5, MovementKind.IN, "Initial Inventory", 5)

        assert store.get_movements() == [m]
        assert (m.kind, m.quantity, m.balance_after) == (MovementKind.IN, 5, 5)

    def test_record_changes_picks_kind_from_sign(self):
        store = InMemoryLedgerStore()
        recorder = StockMovementRecorder(store, clock=StepClock())

        moves = recorder.record_changes(
            [StockChange("a", 4, 9, "LOT"), StockChange("b", -2, 0)], reference="WH/OUT/00001"
        )

        assert [m.kind for m in moves] == [MovementKind.IN, MovementKind.OUT]
        assert moves[0].batch_number == "LOT"
        assert all(m.reference == "WH/OUT/00001" for m in moves)
        assert len(store.get_movements()) == 2

    def test_movements_read_back_newest_first(self):
        store = InMemoryLedgerStore()
        recorder = StockMovementRecorder(store, clock=StepClock())
        first = recorder.record("p1", 1, MovementKind.IN, "r", 1)
        second = recorder.record("p1", 1, MovementKind.IN, "r", 2)
        assert store.get_movements() == [second, first]


class TestAuditTrail:

    def test_record_prepends(self):
        store = InMemoryLedgerStore()
        audit = AuditTrail(store, clock=StepClock())
        audit.record("CREATE", "one", "Admin User", "p1")
        audit.record("UPDATE", "two", "Admin User")
        assert [log.details for log in audit.entries()] == ["two", "one"]
        assert audit.entries()[1].entity_id == "p1"

    def test_retention_evicts_oldest(self):
        store = InMemoryLedgerStore()
        audit = AuditTrail(store, clock=StepClock())
        for i in range(AUDIT_LOG_RETENTION + 1):
            audit.record("ACT", f"entry {i}", "Worker")

        entries = audit.entries()
        assert len(entries) == 100
        assert entries[0].details == "entry 100"
        assert entries[-1].details == "entry 1"
        assert all(e.details != "entry 0" for e in entries)


class TestNextReference:

    def _op(self, reference, op_type=OperationType.RECEIPT):
        return Operation(
            id=reference, reference=reference, type=op_type, partner="",
            items=[OperationLine("a", Quantity(1))],
        )

    def test_first_reference(self):
        assert next_reference([], OperationType.DELIVERY) == "WH/OUT/00001"

    def test_continues_after_highest_of_same_prefix(self):
        ops = [self._op("WH/IN/00124"), self._op("WH/IN/00007"), self._op("WH/OUT/00500")]
        assert next_reference(ops, OperationType.RECEIPT) == "WH/IN/00125"

    def test_ignores_free_form_references(self):
        ops = [self._op("PO-2024-17")]
        assert next_reference(ops, OperationType.RECEIPT) == "WH/IN/00001"
