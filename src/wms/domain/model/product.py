"""Product aggregate.

A product owns its on-hand quantity. Every change to that quantity must be
mirrored by exactly one stock movement, which the application layer records
through the StockMovementRecorder.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wms.domain.exceptions import ValidationError
from wms.domain.model.value_objects import Money, new_id


class ProductStatus(Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


@dataclass
class Product:
    """A stocked item.

    Use ``Product.create()`` for new products; the plain constructor is
    kept simple so the store can reconstitute persisted records.
    """

    id: str
    sku: str
    name: str
    quantity: int
    category: str = "Uncategorized"
    unit: str = "pcs"
    location: str = ""
    price: Money = Money.zero()
    cost: Money = Money.zero()
    supplier: str = ""
    min_level: int = 0

    @staticmethod
    def create(
        sku: str,
        name: str,
        quantity: int = 0,
        *,
        category: str = "Uncategorized",
        unit: str = "pcs",
        location: str = "",
        price: Money | None = None,
        cost: Money | None = None,
        supplier: str = "",
        min_level: int = 0,
    ) -> Product:
        if not sku or not sku.strip():
            raise ValidationError("Product SKU is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        _check_non_negative("Quantity", quantity)
        _check_non_negative("Minimum level", min_level)
        return Product(
            id=new_id(),
            sku=sku.strip(),
            name=name.strip(),
            quantity=quantity,
            category=category,
            unit=unit,
            location=location,
            price=price or Money.zero(),
            cost=cost or Money.zero(),
            supplier=supplier,
            min_level=min_level,
        )

    def set_quantity(self, quantity: int) -> int:
        """Set the on-hand quantity and return the signed change."""
        _check_non_negative("Quantity", quantity)
        delta = quantity - self.quantity
        self.quantity = quantity
        return delta

    @property
    def stock_status(self) -> ProductStatus:
        if self.quantity == 0:
            return ProductStatus.OUT_OF_STOCK
        if self.quantity <= self.min_level:
            return ProductStatus.LOW_STOCK
        return ProductStatus.IN_STOCK

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity


def _check_non_negative(label: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")
