"""Field masks: packed and boolean encodings, algebra, render and copy."""

from fieldmask.core.mask.bit_mask import (
    ALL,
    CATEGORY,
    ID,
    INSTOCK,
    NAME,
    NONE,
    PRICE,
    Mask,
    MaskRangeError,
    all_fields,
    check_mask,
    fields_of,
    intersect,
    mask_of,
    minus,
    no_fields,
    union,
)
from fieldmask.core.mask.models import BitMaskSelector, BoolFieldMask, FieldSelector
from fieldmask.core.mask.operations import (
    DEFAULT_CURRENCY,
    as_selector,
    copy_fields,
    emit,
    format_value,
    render,
)

__all__ = [
    # Bit encoding
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
    # Operations
    "DEFAULT_CURRENCY",
    "as_selector",
    "format_value",
    "render",
    "emit",
    "copy_fields",
]
