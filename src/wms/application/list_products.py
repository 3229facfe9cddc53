"""Application service: List Products use case (query)."""

from __future__ import annotations

from wms.application.dto import ProductDTO
from wms.domain.repository.ledger_store import LedgerStore
from wms.domain.service.stock_queries import StockFilter, filter_products


class ListProductsHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(
        self,
        stock_filter: StockFilter = StockFilter.ALL,
        search: str | None = None,
    ) -> list[ProductDTO]:
        """The ``LOW`` filter shows only 0 < quantity <= min level."""
        products = filter_products(self._store.get_products(), stock_filter, search)
        return [ProductDTO.from_domain(p) for p in products]
