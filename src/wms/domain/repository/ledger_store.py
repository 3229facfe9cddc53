"""Abstract Ledger Store — the sole owner of the four ledger collections.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON files, in-memory) live in
the infrastructure layer and in the test fakes.

Storage is last-write-wins with no native transactions: every mutation is
read-latest, splice, write-whole-collection. Callers must not hold a
collection across a later mutation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from wms.domain.exceptions import LedgerInconsistencyError, PersistenceUnavailableError
from wms.domain.model.audit import AuditLog
from wms.domain.model.movement import StockMovement
from wms.domain.model.operation import Operation
from wms.domain.model.product import Product


class LedgerStore(ABC):

    # --- Collections ----------------------------------------------------------

    @abstractmethod
    def get_products(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def put_products(self, products: list[Product]) -> None:
        """Replace the product collection wholesale."""

    @abstractmethod
    def get_operations(self) -> list[Operation]:
        """Return every operation, most recently created first."""

    @abstractmethod
    def put_operations(self, operations: list[Operation]) -> None:
        """Replace the operation collection wholesale."""

    @abstractmethod
    def get_movements(self) -> list[StockMovement]:
        """Return every stock movement, newest first by timestamp."""

    @abstractmethod
    def put_movements(self, movements: list[StockMovement]) -> None:
        """Replace the movement collection wholesale."""

    @abstractmethod
    def get_audit_logs(self) -> list[AuditLog]:
        """Return every audit entry, newest first by timestamp."""

    @abstractmethod
    def put_audit_logs(self, logs: list[AuditLog]) -> None:
        """Replace the audit collection wholesale."""

    @abstractmethod
    def reset(self) -> None:
        """Discard all four collections and seed them again."""

    # --- Convenience wrappers -------------------------------------------------

    def get_product(self, product_id: str) -> Product | None:
        for product in self.get_products():
            if product.id == product_id:
                return product
        return None

    def get_product_by_sku(self, sku: str) -> Product | None:
        for product in self.get_products():
            if product.sku.lower() == sku.strip().lower():
                return product
        return None

    def get_operation(self, operation_id: str) -> Operation | None:
        for operation in self.get_operations():
            if operation.id == operation_id:
                return operation
        return None

    def get_operation_by_reference(self, reference: str) -> Operation | None:
        for operation in self.get_operations():
            if operation.reference == reference.strip():
                return operation
        return None

    def save_product(self, product: Product) -> None:
        """Upsert by id: replace in place, otherwise append."""
        products = self.get_products()
        for i, existing in enumerate(products):
            if existing.id == product.id:
                products[i] = product
                break
        else:
            products.append(product)
        self.put_products(products)

    def remove_products(self, product_ids: set[str]) -> list[Product]:
        """Drop the given products and return the ones actually removed."""
        products = self.get_products()
        removed = [p for p in products if p.id in product_ids]
        if removed:
            self.put_products([p for p in products if p.id not in product_ids])
        return removed

    def save_operation(self, operation: Operation) -> None:
        """Upsert by id: replace in place, otherwise prepend."""
        operations = self.get_operations()
        for i, existing in enumerate(operations):
            if existing.id == operation.id:
                operations[i] = operation
                break
        else:
            operations.insert(0, operation)
        self.put_operations(operations)

    def apply(self, operation: Operation, products: list[Product]) -> None:
        """Write a pre-validated {operation, product set} as one logical unit.

        The operation is written first. If the product write then fails,
        the operation is already saved and is not rolled back, so the
        failure is raised as LedgerInconsistencyError.
        """
        self.save_operation(operation)
        try:
            self.put_products(products)
        except PersistenceUnavailableError as exc:
            raise LedgerInconsistencyError(
                f"Operation {operation.reference} was saved as {operation.status.value} "
                f"but its stock changes could not be written: {exc}"
            ) from exc

    def append_movements(self, movements: list[StockMovement]) -> None:
        if not movements:
            return
        self.put_movements(self.get_movements() + list(movements))


def newest_first(records: list, key: str = "timestamp") -> list:
    """Sort ledger records by timestamp, newest first, keeping ties stable."""
    return sorted(records, key=lambda r: getattr(r, key), reverse=True)
