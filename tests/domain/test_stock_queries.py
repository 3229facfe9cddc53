"""Unit tests for derived stock facets."""

from datetime import datetime, timezone

from wms.domain.model.movement import MovementKind, StockMovement
from wms.domain.model.operation import (
    Operation,
    OperationLine,
    OperationStatus,
    OperationType,
)
from wms.domain.model.product import Product
from wms.domain.model.value_objects import Money, Quantity
from wms.domain.service import stock_queries as q


def _p(pid, qty, min_level, price="1.00"):
    return Product(id=pid, sku=pid.upper(), name=f"Item {pid}", quantity=qty,
                   min_level=min_level, price=Money.of(price))


def _op(op_type, status):
    return Operation(
        id="x", reference="WH/X/1", type=op_type, partner="P",
        items=[OperationLine("a", Quantity(1))], status=status,
    )


class TestLowStockAsymmetry:

    def test_zero_quantity_counts_on_dashboard_but_not_in_low_filter(self):
        empty = _p("a", 0, 10)
        assert q.is_at_or_below_min(empty)
        assert not q.is_low_stock(empty)
        assert q.dashboard_low_stock_count([empty]) == 1
        assert q.low_stock_count([empty]) == 0
        assert q.filter_products([empty], q.StockFilter.LOW) == []
        assert q.filter_products([empty], q.StockFilter.OUT) == [empty]

    def test_low_filter_bounds(self):
        products = [_p("a", 0, 10), _p("b", 1, 10), _p("c", 10, 10), _p("d", 11, 10)]
        low = q.filter_products(products, q.StockFilter.LOW)
        assert [p.id for p in low] == ["b", "c"]
        assert q.dashboard_low_stock_count(products) == 3
        assert q.out_of_stock_count(products) == 1


def test_search_matches_name_or_sku():
    products = [_p("a", 1, 0), _p("b", 1, 0)]
    assert [p.id for p in q.filter_products(products, search="B")] == ["b"]
    assert [p.id for p in q.filter_products(products, search="item a")] == ["a"]


def test_pending_count_ignores_done_and_other_types():
    ops = [
        _op(OperationType.RECEIPT, OperationStatus.READY),
        _op(OperationType.RECEIPT, OperationStatus.DRAFT),
        _op(OperationType.RECEIPT, OperationStatus.DONE),
        _op(OperationType.DELIVERY, OperationStatus.READY),
    ]
    assert q.pending_count(ops, OperationType.RECEIPT) == 2
    assert q.pending_count(ops, OperationType.DELIVERY) == 1


def test_inventory_valuation():
    products = [_p("a", 3, 0, "2.50"), _p("b", 0, 0, "99.00"), _p("c", 2, 0, "10.00")]
    assert q.inventory_valuation(products) == Money.of("27.50")


def test_replay_balance_sums_only_that_product():
    def m(pid, qty, second):
        return StockMovement(
            id=f"{pid}{second}", product_id=pid,
            timestamp=datetime(2024, 1, 1, 0, 0, second, tzinfo=timezone.utc),
            kind=MovementKind.IN if qty >= 0 else MovementKind.OUT,
            quantity=qty, reference="r", balance_after=0,
        )

    movements = [m("a", 5, 1), m("b", 9, 2), m("a", -3, 3), m("a", 4, 4)]
    assert q.replay_balance(movements, "a") == 6
    assert q.replay_balance(movements, "zzz") == 0
