"""Mask-driven entity operations: selective rendering and selective copy.

Both operations accept either mask encoding (packed int or BoolFieldMask) or
any other FieldSelector, and visit fields in canonical order.

Usage:
    render(product, union(NAME, PRICE))   # '{name: "iPhone 17", price(€): 1299.0}'
    emit(product, BoolFieldMask.all())    # same text plus newline on stdout
    copy_fields(source, target, PRICE)
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from fieldmask.core.mask.bit_mask import Mask, check_mask
from fieldmask.core.mask.models import BitMaskSelector, FieldSelector
from fieldmask.core.product import Product, ProductField

DEFAULT_CURRENCY = "€"


def as_selector(mask: Mask | FieldSelector) -> FieldSelector:
    """Normalize a packed mask, single field, or selector to a FieldSelector.

    Raises:
        TypeError: If mask is not a recognized mask form.
        MaskRangeError: If a packed mask is outside [0, 31].
    """
    if isinstance(mask, int | ProductField):
        return BitMaskSelector(check_mask(mask))
    if isinstance(mask, FieldSelector):
        return mask
    raise TypeError(f"Invalid field mask: {mask!r}")


def format_value(field: ProductField, value: Any) -> str:
    """Render one field value.

    Price uses repr() of the float: the shortest text that round-trips, so
    1299 renders as ``1299.0`` and 0.1 as ``0.1``.
    """
    if field is ProductField.NAME:
        return f'"{value}"'
    if field is ProductField.PRICE:
        return repr(float(value))
    if field is ProductField.CATEGORY:
        return value.name
    if field is ProductField.IN_STOCK:
        return "true" if value else "false"
    return str(value)


def render(product: Product, mask: Mask | FieldSelector, *, currency: str | None = None) -> str:
    """Build the brace-delimited listing of the selected fields.

    Args:
        product: Entity to project.
        mask: Packed mask, single ProductField, or FieldSelector.
        currency: Suffix for the price label (default "€").

    Returns:
        Text like ``{id: 1, inStock: true}``; ``{}`` for an empty selection.
    """
    selector = as_selector(mask)
    currency = DEFAULT_CURRENCY if currency is None else currency
    entries = [
        f"{field.label(currency)}: {format_value(field, product.get(field))}"
        for field in ProductField
        if selector.selected(field)
    ]
    return "{" + ", ".join(entries) + "}"


def emit(
    product: Product,
    mask: Mask | FieldSelector,
    file: TextIO | None = None,
    *,
    currency: str | None = None,
) -> None:
    """Write render() output plus a newline to file (stdout by default)."""
    out = sys.stdout if file is None else file
    out.write(render(product, mask, currency=currency) + "\n")


def copy_fields(source: Product, target: Product, mask: Mask | FieldSelector) -> Product:
    """Overwrite target's selected fields with source's values.

    Fields are independent, so order does not matter; source and target may
    be the same object. Returns target for chaining.
    """
    selector = as_selector(mask)
    for field in ProductField:
        if selector.selected(field):
            target.set(field, source.get(field))
    return target
