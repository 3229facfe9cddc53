"""Application service: Create Operation use case.

Resolves each line's SKU to a product, assigns the next human-readable
reference for the operation type (unless the caller supplies one) and
stores the operation in Draft or Ready. Stock is not touched until the
operation is processed.
"""

from __future__ import annotations

from datetime import date

from wms.application.dto import OperationDTO, OperationLineSpec
from wms.domain.exceptions import EntityNotFoundError, ValidationError
from wms.domain.model.operation import (
    Operation,
    OperationLine,
    OperationStatus,
    OperationType,
)
from wms.domain.model.value_objects import Quantity
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.audit_trail import AuditTrail
from wms.domain.service.operation_references import next_reference


class CreateOperationHandler:

    def __init__(self, store: LedgerStore, audit: AuditTrail | None = None) -> None:
        self._store = store
        self._audit = audit or AuditTrail(store)

    def handle(
        self,
        op_type: OperationType,
        partner: str,
        line_specs: list[OperationLineSpec],
        acting_user: str,
        *,
        status: OperationStatus = OperationStatus.READY,
        scheduled_date: date | None = None,
        reference: str | None = None,
    ) -> OperationDTO:
        names: dict[str, str] = {}
        lines: list[OperationLine] = []
        for spec in line_specs:
            product = self._store.get_product_by_sku(spec.sku)
            if product is None:
                raise EntityNotFoundError(f"Product not found: SKU '{spec.sku}'")
            names[product.id] = product.name
            lines.append(
                OperationLine(
                    product_id=product.id,
                    quantity=Quantity(spec.quantity),
                    batch_number=spec.batch_number or None,
                )
            )

        existing = self._store.get_operations()
        if reference is None:
            reference = next_reference(existing, op_type)
        elif any(op.reference == reference.strip() for op in existing):
            raise ValidationError(f"Reference '{reference.strip()}' already exists")

        operation = Operation.create(
            reference=reference,
            type=op_type,
            partner=partner,
            items=lines,
            status=status,
            scheduled_date=scheduled_date,
        )
        self._store.save_operation(operation)
        self._audit.record(
            "CREATE_OP", f"Created operation {operation.reference}", acting_user, operation.id
        )
        return OperationDTO.from_domain(operation, names)
