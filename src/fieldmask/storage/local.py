"""Local in-memory product store.

A plain list, suitable for single-process use and testing. Each instance is
constructed and owned by its caller; there is no shared module-level store.
Not thread-safe: callers sharing one instance across threads must lock.

Usage:
    repo = InMemoryProductRepository()
    repo.create(Product(1, "iPhone 17", 1299.0, Category.PREMIUM, True))
    repo.find_by_name("iPhone 17")
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Iterator
from typing import Any

from fieldmask.config import CatalogSettings
from fieldmask.core.product import Product, ProductField


class InMemoryProductRepository:
    """List-backed ProductRepository.

    Args:
        products: Optional initial products, added in order via create().
        settings: Catalog settings; loaded from the environment when omitted.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        settings: CatalogSettings | None = None,
    ):
        self._settings = settings or CatalogSettings()
        self._products: list[Product] = []
        for product in products:
            self.create(product)

    def create(self, product: Product) -> Product:
        """Append a product.

        Ids are not required to be unique; a repeated id only warns.

        Returns:
            The stored product (same object, not a copy).
        """
        if self._settings.warn_on_duplicate_id and any(p.id == product.id for p in self._products):
            warnings.warn(
                f"create() received a product with duplicate id {product.id}. "
                f"Both will be kept.",
                stacklevel=2,
            )
        self._products.append(product)
        return product

    def list_all(self) -> tuple[Product, ...]:
        """All products in insertion order.

        Returns:
            Immutable snapshot of the collection; the products themselves are
            the stored instances.
        """
        return tuple(self._products)

    def find_by_field(self, field: ProductField | str, value: Any) -> list[Product]:
        """Exact-match lookup on one field.

        Args:
            field: ProductField, or a name accepted by ProductField.parse.
            value: Value compared with ==; no partial or case-insensitive match.

        Returns:
            Matching products in insertion order (possibly empty).

        Raises:
            UnknownFieldError: If field names no Product field.
            TypeError: If field is neither a ProductField nor a str.
        """
        if isinstance(field, str):
            field = ProductField.parse(field)
        elif not isinstance(field, ProductField):
            raise TypeError(f"Invalid field selector: {field!r}")
        return [p for p in self._products if p.get(field) == value]

    def find_by_name(self, name: str) -> list[Product]:
        return self.find_by_field(ProductField.NAME, name)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.list_all())
