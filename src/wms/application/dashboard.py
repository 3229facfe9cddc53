"""Application service: Dashboard summary (query)."""

from __future__ import annotations

from wms.application.dto import DashboardDTO
from wms.domain.model.operation import OperationType
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service import stock_queries


class DashboardHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self) -> DashboardDTO:
        products = self._store.get_products()
        operations = self._store.get_operations()
        return DashboardDTO(
            total_products=len(products),
            out_of_stock=stock_queries.out_of_stock_count(products),
            # broader warning: out-of-stock items count as low here
            low_stock=stock_queries.dashboard_low_stock_count(products),
            pending_receipts=stock_queries.pending_count(operations, OperationType.RECEIPT),
            pending_deliveries=stock_queries.pending_count(operations, OperationType.DELIVERY),
            inventory_value=str(stock_queries.inventory_valuation(products)),
        )
