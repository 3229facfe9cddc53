"""Application service: Inventory insights from an external advisor.

The advisor gets a read-only snapshot of the products and returns short
advisory messages, which are passed through untouched. An advisor
failure never reaches the caller as an exception and never touches the
ledger.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import structlog

from wms.domain.repository.ledger_store import LedgerStore

logger = structlog.get_logger(__name__)

INSIGHT_TYPES = ("warning", "suggestion", "success")


class AdvisorUnavailableError(Exception):
    """The advisor could not be reached or returned an unusable answer."""


@dataclass(frozen=True)
class Insight:
    type: str
    message: str
    action: str | None = None


class InsightAdvisor(ABC):

    @abstractmethod
    def analyze(self, snapshot: dict) -> list[Insight]:
        """Return insights for a ``{"products": [...]}`` snapshot."""


UNAVAILABLE = Insight(
    type="warning",
    message="AI Analysis currently unavailable.",
    action="Retry",
)


class InventoryInsightsHandler:

    def __init__(self, store: LedgerStore, advisor: InsightAdvisor | None) -> None:
        self._store = store
        self._advisor = advisor

    def handle(self) -> list[Insight]:
        if self._advisor is None:
            return []
        snapshot = self.snapshot()
        try:
            return self._advisor.analyze(snapshot)
        except AdvisorUnavailableError as exc:
            logger.error("Inventory analysis failed", error=str(exc))
            return [UNAVAILABLE]

    def snapshot(self) -> dict:
        return {
            "products": [
                {
                    "name": p.name,
                    "sku": p.sku,
                    "qty": p.quantity,
                    "min": p.min_level,
                    "value": float(p.price.amount),
                }
                for p in self._store.get_products()
            ]
        }
