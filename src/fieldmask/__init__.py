"""fieldmask: Product catalog with selective rendering and copying by field mask.

Usage:
    from fieldmask import NAME, PRICE, Category, Product, render, union

    product = Product(1, "iPhone 17", 1299.0, Category.PREMIUM, True)
    render(product, union(NAME, PRICE))
    # '{name: "iPhone 17", price(€): 1299.0}'

    mask = BoolFieldMask.none()
    mask.name = True
    mask.price = True
    render(product, mask)  # same text
"""

__version__ = "0.1.0"

# Configuration
from fieldmask.config import CatalogSettings

# Core primitives
from fieldmask.core import (
    ALL,
    CATEGORY,
    ID,
    INSTOCK,
    NAME,
    NONE,
    PRICE,
    BitMaskSelector,
    BoolFieldMask,
    Category,
    FieldSelector,
    Mask,
    MaskRangeError,
    Product,
    ProductField,
    UnknownFieldError,
    all_fields,
    as_selector,
    check_mask,
    copy_fields,
    emit,
    fields_of,
    intersect,
    mask_of,
    minus,
    no_fields,
    render,
    union,
)

# Storage
from fieldmask.storage import (
    InMemoryProductRepository,
    ProductRepository,
)

__all__ = [
    # Version
    "__version__",
    # Product
    "Product",
    "Category",
    "ProductField",
    "UnknownFieldError",
    # Masks
    "ID",
    "NAME",
    "PRICE",
    "CATEGORY",
    "INSTOCK",
    "ALL",
    "NONE",
    "Mask",
    "MaskRangeError",
    "all_fields",
    "no_fields",
    "union",
    "intersect",
    "minus",
    "mask_of",
    "fields_of",
    "check_mask",
    "FieldSelector",
    "BitMaskSelector",
    "BoolFieldMask",
    "as_selector",
    "render",
    "emit",
    "copy_fields",
    # Storage
    "ProductRepository",
    "InMemoryProductRepository",
    # Config
    "CatalogSettings",
]
