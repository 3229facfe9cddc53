"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON-backed classes
but keep everything in lists. Records are deep-copied on the way in and
out so, like a real store, nothing changes until it is written back.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone

from wms.domain.exceptions import PersistenceUnavailableError
from wms.domain.model.audit import AuditLog
from wms.domain.model.movement import StockMovement
from wms.domain.model.operation import Operation
from wms.domain.model.product import Product
from wms.domain.model.user import User
from wms.domain.repository.ledger_store import LedgerStore, newest_first
from wms.domain.repository.user_repository import UserRepository


class InMemoryLedgerStore(LedgerStore):

    def __init__(
        self,
        products: list[Product] | None = None,
        operations: list[Operation] | None = None,
    ) -> None:
        self._seed_products = copy.deepcopy(products or [])
        self._seed_operations = copy.deepcopy(operations or [])
        self.failing: set[str] = set()
        self.reset()

    def get_products(self) -> list[Product]:
        return copy.deepcopy(self._products)

    def put_products(self, products: list[Product]) -> None:
        self._check("products")
        self._products = copy.deepcopy(products)

    def get_operations(self) -> list[Operation]:
        return copy.deepcopy(self._operations)

    def put_operations(self, operations: list[Operation]) -> None:
        self._check("operations")
        self._operations = copy.deepcopy(operations)

    def get_movements(self) -> list[StockMovement]:
        return newest_first(list(self._movements))

    def put_movements(self, movements: list[StockMovement]) -> None:
        self._check("movements")
        self._movements = list(movements)

    def get_audit_logs(self) -> list[AuditLog]:
        return newest_first(list(self._audit_logs))

    def put_audit_logs(self, logs: list[AuditLog]) -> None:
        self._check("audit_logs")
        self._audit_logs = list(logs)

    def reset(self) -> None:
        self._products = copy.deepcopy(self._seed_products)
        self._operations = copy.deepcopy(self._seed_operations)
        self._movements: list[StockMovement] = []
        self._audit_logs: list[AuditLog] = []

    def _check(self, collection: str) -> None:
        if collection in self.failing:
            raise PersistenceUnavailableError(f"Cannot write {collection}: disk full")


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {u.id: u for u in users or []}

    def get_by_email(self, email: str) -> User | None:
        for u in self._store.values():
            if u.email.lower() == email.lower():
                return u
        return None

    def list_all(self) -> list[User]:
        return list(self._store.values())


class StepClock:
    """Returns strictly increasing UTC timestamps, one second apart."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now
