"""Field selectors: the two mask encodings behind one query interface.

render and copy_fields only ever ask "is this field selected?", so any
object implementing FieldSelector can drive them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Self, runtime_checkable

from fieldmask.core.mask.bit_mask import Mask, check_mask
from fieldmask.core.product import ProductField


@runtime_checkable
class FieldSelector(Protocol):
    """Answers whether a field is part of the selection."""

    def selected(self, field: ProductField) -> bool: ...


@dataclass(frozen=True, slots=True)
class BitMaskSelector:
    """Read-only view of a packed mask as a FieldSelector."""

    bits: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "bits", check_mask(self.bits))

    def selected(self, field: ProductField) -> bool:
        return bool(self.bits & field.bit)


@dataclass(slots=True)
class BoolFieldMask:
    """One independent flag per field. No algebra; flags are free choices."""

    id: bool = False
    name: bool = False
    price: bool = False
    category: bool = False
    in_stock: bool = False

    @classmethod
    def all(cls) -> Self:
        return cls(id=True, name=True, price=True, category=True, in_stock=True)

    @classmethod
    def none(cls) -> Self:
        return cls()

    @classmethod
    def from_bits(cls, mask: Mask) -> Self:
        """Mirror a packed mask flag-for-flag."""
        bits = check_mask(mask)
        return cls(**{field.attribute: bool(bits & field.bit) for field in ProductField})

    def to_bits(self) -> int:
        result = 0
        for field in ProductField:
            if self.selected(field):
                result |= field.bit
        return result

    def selected(self, field: ProductField) -> bool:
        return bool(getattr(self, field.attribute))
