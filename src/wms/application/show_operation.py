"""Application services: List Operations and Show Operation (queries)."""

from __future__ import annotations

from wms.application.dto import OperationDTO
from wms.domain.exceptions import EntityNotFoundError
from wms.domain.model.operation import OperationStatus
from wms.domain.repository.ledger_store import LedgerStore


class ListOperationsHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, status: OperationStatus | None = None) -> list[OperationDTO]:
        names = {p.id: p.name for p in self._store.get_products()}
        return [
            OperationDTO.from_domain(op, names)
            for op in self._store.get_operations()
            if status is None or op.status == status
        ]


class ShowOperationHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, operation_id: str) -> OperationDTO:
        operation = self._store.get_operation(operation_id)
        if operation is None:
            raise EntityNotFoundError(f"Operation '{operation_id}' not found")
        names = {p.id: p.name for p in self._store.get_products()}
        return OperationDTO.from_domain(operation, names)
