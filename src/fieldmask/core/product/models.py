"""Product entity and its field symbols.

Usage:
    product = Product(1, "iPhone 17", 1299.0, Category.PREMIUM, True)
    ProductField.PRICE.bit        # 4
    ProductField.parse("inStock") # ProductField.IN_STOCK
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from enum import Enum
from typing import Any


class UnknownFieldError(ValueError):
    """Raised when a field selector names no Product field."""

    pass


class Category(Enum):
    """Closed set of product tiers."""

    STANDARD = "standard"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class ProductField(Enum):
    """The five Product fields, declared in canonical order.

    Member value is the field's bit in a packed mask. Definition order is the
    rendering order, so iterating the enum always yields ID, NAME, PRICE,
    CATEGORY, IN_STOCK.
    """

    ID = 1 << 0
    NAME = 1 << 1
    PRICE = 1 << 2
    CATEGORY = 1 << 3
    IN_STOCK = 1 << 4

    @property
    def bit(self) -> int:
        return self.value

    @property
    def attribute(self) -> str:
        """Name of the Product attribute this symbol selects."""
        return self.name.lower()

    def label(self, currency: str = "€") -> str:
        """Label used by render. Only PRICE carries the currency suffix."""
        if self is ProductField.PRICE:
            return f"price({currency})"
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> ProductField:
        """Resolve a field from its member, attribute or label name.

        Raises:
            UnknownFieldError: If no field goes by that name.
        """
        field = _ALIASES.get(name)
        if field is None:
            raise UnknownFieldError(f"Unknown product field: {name!r}")
        return field


_LABELS: dict[ProductField, str] = {
    ProductField.ID: "id",
    ProductField.NAME: "name",
    ProductField.CATEGORY: "category",
    ProductField.IN_STOCK: "inStock",
}

_ALIASES: dict[str, ProductField] = {}
for _field in ProductField:
    _ALIASES.update({_field.name: _field, _field.attribute: _field, _field.label(): _field})
del _field


@dataclass(slots=True)
class Product:
    """Catalog entry. All fields are mutable after construction."""

    id: int
    name: str
    price: float  # non-negative by convention, unit-agnostic
    category: Category
    in_stock: bool

    def snapshot(self) -> tuple[Any, ...]:
        """Field values in canonical order."""
        return astuple(self)

    def get(self, field: ProductField) -> Any:
        return getattr(self, field.attribute)

    def set(self, field: ProductField, value: Any) -> None:
        setattr(self, field.attribute, value)
