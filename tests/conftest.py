"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from fieldmask import CatalogSettings, Category, InMemoryProductRepository, Product


@pytest.fixture
def iphone() -> Product:
    """The reference product used by the rendering scenarios."""
    return Product(1, "iPhone 17", 1299.0, Category.PREMIUM, True)


@pytest.fixture
def macbook() -> Product:
    return Product(2, "MacBook Air", 1499.0, Category.ENTERPRISE, False)


@pytest.fixture
def settings() -> CatalogSettings:
    """Settings pinned to defaults, independent of the environment."""
    return CatalogSettings(currency_symbol="€", warn_on_duplicate_id=True)


@pytest.fixture
def repo(settings: CatalogSettings) -> InMemoryProductRepository:
    """Repository seeded with four products, two named "iPhone 17"."""
    return InMemoryProductRepository(
        [
            Product(1, "iPhone 17", 1299.0, Category.PREMIUM, True),
            Product(2, "MacBook Air", 1499.0, Category.ENTERPRISE, True),
            Product(3, "iPad 10", 579.0, Category.STANDARD, True),
            Product(4, "iPhone 17", 1349.0, Category.PREMIUM, False),
        ],
        settings=settings,
    )
