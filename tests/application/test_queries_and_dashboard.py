"""Integration tests for the read-side use cases."""

from wms.application.dashboard import DashboardHandler
from wms.application.show_history import ShowAuditLogHandler, ShowMovementsHandler
from wms.domain.model.movement import MovementKind
from wms.domain.model.operation import (
    Operation,
    OperationLine,
    OperationStatus,
    OperationType,
)
from wms.domain.model.product import Product
from wms.domain.model.value_objects import Money, Quantity
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.stock_movement_recorder import StockMovementRecorder
from tests.fakes import InMemoryLedgerStore, StepClock


def _op(op_id, op_type, status):
    return Operation(
        id=op_id, reference=f"WH/X/{op_id}", type=op_type, partner="P",
        items=[OperationLine("p1", Quantity(1))], status=status,
    )


class TestDashboard:

    def test_summary(self):
        store = InMemoryLedgerStore(
            products=[
                Product(id="p1", sku="A", name="A", quantity=0, min_level=10, price=Money.of("5")),
                Product(id="p2", sku="B", name="B", quantity=3, min_level=10, price=Money.of("2.50")),
                Product(id="p3", sku="C", name="C", quantity=50, min_level=10, price=Money.of("1")),
            ],
            operations=[
                _op("1", OperationType.RECEIPT, OperationStatus.READY),
                _op("2", OperationType.RECEIPT, OperationStatus.DONE),
                _op("3", OperationType.DELIVERY, OperationStatus.DRAFT),
                _op("4", OperationType.INTERNAL, OperationStatus.READY),
            ],
        )

        dto = DashboardHandler(store).handle()

        assert dto.total_products == 3
        assert dto.out_of_stock == 1
        assert dto.low_stock == 2
        assert dto.pending_receipts == 1
        assert dto.pending_deliveries == 1
        assert dto.inventory_value == "$57.50"

    def test_empty_ledger(self):
        dto = DashboardHandler(InMemoryLedgerStore()).handle()
        assert (dto.total_products, dto.low_stock, dto.inventory_value) == (0, 0, "$0.00")


class TestHistory:

    def test_movements_filtered_by_product_newest_first(self):
        store = InMemoryLedgerStore()
        recorder = StockMovementRecorder(store, clock=StepClock())
        recorder.record("p1", 5, MovementKind.IN, "Initial Inventory", 5)
        recorder.record("p2", 1, MovementKind.IN, "Initial Inventory", 1)
        recorder.record("p1", -2, MovementKind.OUT, "WH/OUT/00001", 3)

        rows = ShowMovementsHandler(store).handle("p1")

        assert [(r.kind, r.quantity, r.balance_after) for r in rows] == [
            ("OUT", -2, 3),
            ("IN", 5, 5),
        ]
        assert rows[0].timestamp == "2024-01-01 09:00 UTC"

    def test_audit_log_limit(self):
        store = InMemoryLedgerStore()
        audit = AuditTrail(store, clock=StepClock())
        for i in range(5):
            audit.record("ACT", f"entry {i}", "Admin User")

        rows = ShowAuditLogHandler(store).handle(limit=2)

        assert [r.details for r in rows] == ["entry 4", "entry 3"]
