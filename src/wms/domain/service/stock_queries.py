"""Derived, read-only facets over the current product and operation state.

Two notions of "low stock" coexist on purpose:

- ``is_low_stock`` is the detail-view filter: 0 < quantity <= min_level.
- ``is_at_or_below_min`` is the dashboard warning: quantity <= min_level,
  so out-of-stock products are counted as low as well.
"""

from __future__ import annotations

from enum import Enum

from wms.domain.model.movement import StockMovement
from wms.domain.model.operation import Operation, OperationStatus, OperationType
from wms.domain.model.product import Product
from wms.domain.model.value_objects import Money


class StockFilter(Enum):
    ALL = "all"
    LOW = "low"
    OUT = "out"


def is_out_of_stock(product: Product) -> bool:
    return product.quantity == 0


def is_low_stock(product: Product) -> bool:
    return 0 < product.quantity <= product.min_level


def is_at_or_below_min(product: Product) -> bool:
    return product.quantity <= product.min_level


def out_of_stock_count(products: list[Product]) -> int:
    return sum(1 for p in products if is_out_of_stock(p))


def low_stock_count(products: list[Product]) -> int:
    """Detail-view count; excludes out-of-stock products."""
    return sum(1 for p in products if is_low_stock(p))


def dashboard_low_stock_count(products: list[Product]) -> int:
    """Dashboard count; includes out-of-stock products."""
    return sum(1 for p in products if is_at_or_below_min(p))


def filter_products(
    products: list[Product],
    stock_filter: StockFilter = StockFilter.ALL,
    search: str | None = None,
) -> list[Product]:
    needle = (search or "").strip().lower()
    result = []
    for p in products:
        if needle and needle not in p.name.lower() and needle not in p.sku.lower():
            continue
        if stock_filter == StockFilter.LOW and not is_low_stock(p):
            continue
        if stock_filter == StockFilter.OUT and not is_out_of_stock(p):
            continue
        result.append(p)
    return result


def pending_count(operations: list[Operation], op_type: OperationType) -> int:
    return sum(
        1 for o in operations if o.type == op_type and o.status != OperationStatus.DONE
    )


def inventory_valuation(products: list[Product]) -> Money:
    total = Money.zero()
    for p in products:
        total = total + p.stock_value
    return total


def replay_balance(movements: list[StockMovement], product_id: str) -> int:
    """Cumulative sum of a product's movement deltas, starting from zero."""
    ordered = sorted(
        (m for m in movements if m.product_id == product_id),
        key=lambda m: m.timestamp,
    )
    balance = 0
    for m in ordered:
        balance += m.quantity
    return balance
