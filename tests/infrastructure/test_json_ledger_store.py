"""Tests for the JSON-file-backed ledger store and user repository."""

from datetime import datetime, timezone

import pytest

from wms.domain.exceptions import PersistenceUnavailableError
from wms.domain.model.movement import MovementKind, StockMovement
from wms.domain.model.operation import Operation, OperationLine, OperationType
from wms.domain.model.product import Product
from wms.domain.model.user import Role
from wms.domain.model.value_objects import Money, Quantity
from wms.domain.service.stock_queries import replay_balance
from wms.infrastructure.persistence.json_ledger_store import JsonLedgerStore
from wms.infrastructure.persistence.json_user_repository import JsonUserRepository


def _at(hour):
    return datetime(2024, 1, 1, hour, tzinfo=timezone.utc)


class TestSeeding:

    def test_missing_files_are_seeded_with_demo_data(self, tmp_path):
        store = JsonLedgerStore(tmp_path)

        assert [p.sku for p in store.get_products()][:2] == ["ELEC-001", "ELEC-002"]
        assert store.get_operation_by_reference("WH/OUT/00099").is_done
        for name in ("products", "operations", "stock_movements", "audit_logs"):
            assert (tmp_path / f"{name}.json").exists()

    def test_demo_movements_replay_to_demo_quantities(self, tmp_path):
        store = JsonLedgerStore(tmp_path)
        movements = store.get_movements()
        for product in store.get_products():
            assert replay_balance(movements, product.id) == product.quantity

    def test_empty_seed(self, tmp_path):
        store = JsonLedgerStore(tmp_path, seed_demo_data=False)
        assert store.get_products() == []
        assert store.get_operations() == []
        assert store.get_movements() == []

    def test_existing_files_are_not_reseeded(self, tmp_path):
        JsonLedgerStore(tmp_path).remove_products({"1"})
        assert JsonLedgerStore(tmp_path).get_product("1") is None

    def test_deleted_file_is_seeded_again_on_read(self, tmp_path):
        store = JsonLedgerStore(tmp_path, seed_demo_data=False)
        (tmp_path / "audit_logs.json").unlink()
        assert store.get_audit_logs() == []


class TestRoundTrip:

    def test_product(self, tmp_path):
        store = JsonLedgerStore(tmp_path, seed_demo_data=False)
        product = Product.create(
            "A1", "Widget", 4, category="Tools", price=Money.of("19.99"), min_level=2
        )
        store.save_product(product)

        loaded = store.get_product_by_sku(" a1 ")
        assert loaded == product
        assert loaded.price == Money.of("19.99")

    def test_operation_with_batch(self, tmp_path):
        store = JsonLedgerStore(tmp_path, seed_demo_data=False)
        op = Operation.create(
            "WH/IN/00001", OperationType.RECEIPT, "Vendor",
            [OperationLine("p1", Quantity(3), batch_number="LOT-1")],
        )
        store.save_operation(op)
        assert store.get_operation(op.id) == op

    def test_movements_newest_first(self, tmp_path):
        store = JsonLedgerStore(tmp_path, seed_demo_data=False)
        first = StockMovement("m1", "p1", _at(9), MovementKind.IN, 2, "r", 2)
        second = StockMovement("m2", "p1", _at(10), MovementKind.OUT, -1, "r", 1)
        store.append_movements([first])
        store.append_movements([second])
        assert [m.id for m in store.get_movements()] == ["m2", "m1"]


class TestFailures:

    def test_corrupt_file_raises_persistence_error(self, tmp_path):
        store = JsonLedgerStore(tmp_path, seed_demo_data=False)
        (tmp_path / "products.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceUnavailableError, match="Cannot read products"):
            store.get_products()

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "data"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(PersistenceUnavailableError):
            JsonLedgerStore(blocker)


class TestReset:

    def test_reset_restores_seed_data(self, tmp_path):
        store = JsonLedgerStore(tmp_path)
        store.remove_products({"1", "2"})
        store.append_movements([StockMovement("m1", "4", _at(9), MovementKind.OUT, -1, "r", 299)])

        store.reset()

        assert len(store.get_products()) == 5
        assert len(store.get_operations()) == 4
        assert all(m.reference == "Initial Inventory" for m in store.get_movements())


class TestJsonUserRepository:

    def test_seeded_demo_users(self, tmp_path):
        repo = JsonUserRepository(tmp_path / "users.json")
        admin = repo.get_by_email("ADMIN@nex.com")
        assert admin.name == "Admin User"
        assert admin.role == Role.ADMIN
        assert len(repo.list_all()) == 3

    def test_unknown_email(self, tmp_path):
        assert JsonUserRepository(tmp_path / "users.json").get_by_email("x@y.z") is None
