"""Product storage backends."""

from fieldmask.storage.local import InMemoryProductRepository
from fieldmask.storage.protocol import ProductRepository

__all__ = [
    "ProductRepository",
    "InMemoryProductRepository",
]
