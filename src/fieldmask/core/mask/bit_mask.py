"""Packed field masks: a set of ProductField symbols as a 5-bit integer.

Bit i is set when the i-th field (canonical order) is selected. All
operations are pure and take plain ints; ProductField members are accepted
wherever a mask is, standing for their single bit.

Usage:
    mask = union(NAME, PRICE)          # 6
    minus(all_fields(), ID)            # 30
    fields_of(mask)                    # (ProductField.NAME, ProductField.PRICE)
"""

from __future__ import annotations

from typing import TypeAlias

from fieldmask.core.product import ProductField

Mask: TypeAlias = int | ProductField

ID = ProductField.ID.bit
NAME = ProductField.NAME.bit
PRICE = ProductField.PRICE.bit
CATEGORY = ProductField.CATEGORY.bit
INSTOCK = ProductField.IN_STOCK.bit

ALL = ID | NAME | PRICE | CATEGORY | INSTOCK
NONE = 0


class MaskRangeError(ValueError):
    """Raised when a mask sets bits outside the five-field universe."""

    pass


def check_mask(mask: Mask) -> int:
    """Validate a mask and return it as a plain int.

    Raises:
        TypeError: If mask is neither an int nor a ProductField (bools rejected).
        MaskRangeError: If mask is outside [0, 31].
    """
    if isinstance(mask, ProductField):
        return mask.bit
    if isinstance(mask, bool) or not isinstance(mask, int):
        raise TypeError(f"Field mask must be an int, got {type(mask).__name__}")
    if not NONE <= mask <= ALL:
        raise MaskRangeError(f"Field mask {mask} is outside [0, {ALL}]")
    return mask


def all_fields() -> int:
    return ALL


def no_fields() -> int:
    return NONE


def union(a: Mask, b: Mask) -> int:
    """Fields in either mask."""
    return check_mask(a) | check_mask(b)


def intersect(a: Mask, b: Mask) -> int:
    """Fields in both masks."""
    return check_mask(a) & check_mask(b)


def minus(a: Mask, b: Mask) -> int:
    """Fields in a but not in b."""
    return check_mask(a) & ~check_mask(b) & ALL


def mask_of(*fields: ProductField) -> int:
    """Encode fields into a mask. Duplicates are harmless."""
    result = NONE
    for field in fields:
        if not isinstance(field, ProductField):
            raise TypeError(f"Expected ProductField, got {type(field).__name__}")
        result |= field.bit
    return result


def fields_of(mask: Mask) -> tuple[ProductField, ...]:
    """Decode a mask into its fields, in canonical order."""
    bits = check_mask(mask)
    return tuple(field for field in ProductField if bits & field.bit)
