"""Repository protocol for product stores.

The store is a collaborator of the mask operations, not a user of them: it
hands out Product instances and knows nothing about masks.

Usage:
    repo: ProductRepository = InMemoryProductRepository()
    repo.create(product)
    repo.find_by_field(ProductField.NAME, "iPhone 17")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from fieldmask.core.product import Product, ProductField


class ProductRepository(Protocol):
    """Abstract product store."""

    def create(self, product: Product) -> Product:
        """Add product; insertion order is preserved."""
        ...

    def list_all(self) -> Sequence[Product]:
        """All products in insertion order. Read-only and restartable."""
        ...

    def find_by_field(self, field: ProductField | str, value: Any) -> list[Product]:
        """Products whose field equals value exactly, in insertion order."""
        ...
