"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from wms.domain.exceptions import ValidationError
from wms.domain.model.value_objects import Money, Quantity, new_id, utc_now


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_of_factory_from_string(self):
        assert Money.of("29.99").amount == Decimal("29.99")

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0.00")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    @pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(amount)

    def test_multiplication_by_quantity(self):
        assert Money.of("45.00") * 300 == Money.of("13500.00")

    def test_str_formatting(self):
        assert str(Money.of("9.5")) == "$9.50"
        assert str(Money.of("13500")) == "$13,500.00"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


def test_new_id_is_unique():
    assert len({new_id() for _ in range(1000)}) == 1000


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is not None
