"""Core functionality: the Product entity and field masks.

Architecture Note:
    core/ is pure and stateless apart from explicit copy_fields target
    mutation. For the stateful product store, see storage/.
"""

from fieldmask.core.mask import (
    ALL,
    CATEGORY,
    ID,
    INSTOCK,
    NAME,
    NONE,
    PRICE,
    BitMaskSelector,
    BoolFieldMask,
    FieldSelector,
    Mask,
    MaskRangeError,
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
from fieldmask.core.product import Category, Product, ProductField, UnknownFieldError

__all__ = [
    # Product
    "Product",
    "Category",
    "ProductField",
    "UnknownFieldError",
    # Bit masks
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
    # Selectors
    "FieldSelector",
    "BitMaskSelector",
    "BoolFieldMask",
    "as_selector",
    # Operations
    "render",
    "emit",
    "copy_fields",
]
