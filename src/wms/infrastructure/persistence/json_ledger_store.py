"""JSON-file-backed implementation of LedgerStore.

Each collection is one JSON list in ``data_dir``. A missing file is not
an error: it is seeded once (demo data or empty) and then read back.
Writes replace the whole file, last write wins.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

import structlog

from wms.domain.exceptions import PersistenceUnavailableError
from wms.domain.model.audit import AuditLog
from wms.domain.model.movement import MovementKind, StockMovement
from wms.domain.model.operation import (
    Operation,
    OperationLine,
    OperationStatus,
    OperationType,
)
from wms.domain.model.product import Product
from wms.domain.model.value_objects import Money, Quantity, utc_now
from wms.domain.repository.ledger_store import LedgerStore, newest_first
from wms.infrastructure.persistence import seed_data

logger = structlog.get_logger(__name__)

PRODUCTS = "products"
OPERATIONS = "operations"
MOVEMENTS = "stock_movements"
AUDIT_LOGS = "audit_logs"
COLLECTIONS = (PRODUCTS, OPERATIONS, MOVEMENTS, AUDIT_LOGS)


class JsonLedgerStore(LedgerStore):

    def __init__(self, data_dir: Path, seed_demo_data: bool = True) -> None:
        self._data_dir = data_dir
        self._seed_demo_data = seed_demo_data
        for name in COLLECTIONS:
            self._ensure_file(name)

    # --- LedgerStore interface ------------------------------------------------

    def get_products(self) -> list[Product]:
        return [self._product_to_domain(r) for r in self._load_raw(PRODUCTS)]

    def put_products(self, products: list[Product]) -> None:
        self._persist_raw(PRODUCTS, [self._product_to_raw(p) for p in products])

    def get_operations(self) -> list[Operation]:
        return [self._operation_to_domain(r) for r in self._load_raw(OPERATIONS)]

    def put_operations(self, operations: list[Operation]) -> None:
        self._persist_raw(OPERATIONS, [self._operation_to_raw(o) for o in operations])

    def get_movements(self) -> list[StockMovement]:
        return newest_first([self._movement_to_domain(r) for r in self._load_raw(MOVEMENTS)])

    def put_movements(self, movements: list[StockMovement]) -> None:
        self._persist_raw(MOVEMENTS, [self._movement_to_raw(m) for m in movements])

    def get_audit_logs(self) -> list[AuditLog]:
        return newest_first([self._audit_to_domain(r) for r in self._load_raw(AUDIT_LOGS)])

    def put_audit_logs(self, logs: list[AuditLog]) -> None:
        self._persist_raw(AUDIT_LOGS, [self._audit_to_raw(log) for log in logs])

    def reset(self) -> None:
        for name in COLLECTIONS:
            try:
                self._path(name).unlink(missing_ok=True)
            except OSError as exc:
                raise PersistenceUnavailableError(f"Cannot remove {name}: {exc}") from exc
        for name in COLLECTIONS:
            self._ensure_file(name)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "sku": p.sku,
            "name": p.name,
            "category": p.category,
            "quantity": p.quantity,
            "unit": p.unit,
            "location": p.location,
            "price": str(p.price.amount),
            "cost": str(p.cost.amount),
            "supplier": p.supplier,
            "min_level": p.min_level,
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            sku=raw["sku"],
            name=raw["name"],
            category=raw.get("category", "Uncategorized"),
            quantity=raw["quantity"],
            unit=raw.get("unit", "pcs"),
            location=raw.get("location", ""),
            price=Money(Decimal(raw.get("price", "0"))),
            cost=Money(Decimal(raw.get("cost", "0"))),
            supplier=raw.get("supplier", ""),
            min_level=raw.get("min_level", 0),
        )

    @staticmethod
    def _operation_to_raw(op: Operation) -> dict:
        return {
            "id": op.id,
            "reference": op.reference,
            "type": op.type.value,
            "partner": op.partner,
            "status": op.status.value,
            "scheduled_date": op.scheduled_date.isoformat(),
            "items": [
                {
                    "product_id": line.product_id,
                    "quantity": line.quantity.value,
                    "done": line.done,
                    "batch_number": line.batch_number,
                }
                for line in op.items
            ],
        }

    @staticmethod
    def _operation_to_domain(raw: dict) -> Operation:
        return Operation(
            id=raw["id"],
            reference=raw["reference"],
            type=OperationType(raw["type"]),
            partner=raw.get("partner", ""),
            status=OperationStatus(raw["status"]),
            scheduled_date=date.fromisoformat(raw["scheduled_date"]),
            items=[
                OperationLine(
                    product_id=i["product_id"],
                    quantity=Quantity(i["quantity"]),
                    done=i.get("done", 0),
                    batch_number=i.get("batch_number"),
                )
                for i in raw["items"]
            ],
        )

    @staticmethod
    def _movement_to_raw(m: StockMovement) -> dict:
        return {
            "id": m.id,
            "product_id": m.product_id,
            "timestamp": m.timestamp.isoformat(),
            "kind": m.kind.value,
            "quantity": m.quantity,
            "reference": m.reference,
            "balance_after": m.balance_after,
            "batch_number": m.batch_number,
        }

    @staticmethod
    def _movement_to_domain(raw: dict) -> StockMovement:
        return StockMovement(
            id=raw["id"],
            product_id=raw["product_id"],
            timestamp=datetime.fromisoformat(raw["timestamp"]),
            kind=MovementKind(raw["kind"]),
            quantity=raw["quantity"],
            reference=raw["reference"],
            balance_after=raw["balance_after"],
            batch_number=raw.get("batch_number"),
        )

    @staticmethod
    def _audit_to_raw(log: AuditLog) -> dict:
        return {
            "id": log.id,
            "action": log.action,
            "details": log.details,
            "user": log.user,
            "timestamp": log.timestamp.isoformat(),
            "entity_id": log.entity_id,
        }

    @staticmethod
    def _audit_to_domain(raw: dict) -> AuditLog:
        return AuditLog(
            id=raw["id"],
            action=raw["action"],
            details=raw["details"],
            user=raw["user"],
            timestamp=datetime.fromisoformat(raw["timestamp"]),
            entity_id=raw.get("entity_id"),
        )

    # --- File helpers ---------------------------------------------------------

    def _path(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def _load_raw(self, name: str) -> list[dict]:
        self._ensure_file(name)
        try:
            return json.loads(self._path(name).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Cannot read collection", collection=name, error=str(exc))
            raise PersistenceUnavailableError(f"Cannot read {name}: {exc}") from exc

    def _persist_raw(self, name: str, records: list[dict]) -> None:
        try:
            self._path(name).write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Cannot write collection", collection=name, error=str(exc))
            raise PersistenceUnavailableError(f"Cannot write {name}: {exc}") from exc

    def _ensure_file(self, name: str) -> None:
        path = self._path(name)
        if path.exists():
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceUnavailableError(f"Cannot create {path.parent}: {exc}") from exc
        defaults = self._defaults(name)
        logger.info("Seeding collection", collection=name, records=len(defaults))
        self._persist_raw(name, defaults)

    def _defaults(self, name: str) -> list[dict]:
        if not self._seed_demo_data:
            return []
        if name == PRODUCTS:
            return seed_data.DEMO_PRODUCTS
        if name == OPERATIONS:
            return seed_data.DEMO_OPERATIONS
        if name == MOVEMENTS:
            return seed_data.demo_movements(utc_now().isoformat())
        return []
