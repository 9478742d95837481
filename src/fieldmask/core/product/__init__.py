"""Product entity: record, category tiers and field symbols."""

from fieldmask.core.product.models import Category, Product, ProductField, UnknownFieldError

__all__ = [
    "Category",
    "Product",
    "ProductField",
    "UnknownFieldError",
]
