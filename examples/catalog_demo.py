"""Catalog walkthrough: lookup, masked printing and masked copy.

Usage:
    python examples/catalog_demo.py
    python examples/catalog_demo.py --currency '$'
    FIELDMASK_CURRENCY_SYMBOL=£ python examples/catalog_demo.py
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from fieldmask import (
    ID,
    NAME,
    PRICE,
    BoolFieldMask,
    CatalogSettings,
    Category,
    InMemoryProductRepository,
    Product,
    all_fields,
    copy_fields,
    emit,
    minus,
    union,
)


def sample_products() -> list[Product]:
    """Four products, two of them sharing the name "iPhone 17"."""
    return [
        Product(1, "iPhone 17", 1299.0, Category.PREMIUM, True),
        Product(2, "MacBook Air", 1499.0, Category.ENTERPRISE, True),
        Product(3, "iPad 10", 579.0, Category.STANDARD, True),
        Product(4, "iPhone 17", 1349.0, Category.PREMIUM, False),
    ]


def run(settings: CatalogSettings, out: TextIO) -> None:
    """Print the walkthrough to out."""
    currency = settings.currency_symbol
    repo = InMemoryProductRepository(sample_products(), settings=settings)

    iphones = repo.find_by_name("iPhone 17")
    print(f"find_by_name('iPhone 17') -> {len(iphones)} found", file=out)

    name_price = union(NAME, PRICE)
    for product in repo.list_all():
        emit(product, name_price, out, currency=currency)

    bool_mask = BoolFieldMask.none()
    bool_mask.name = True
    bool_mask.price = True
    print("bool mask (name+price):", file=out)
    emit(repo.list_all()[0], bool_mask, out, currency=currency)

    print("all but id:", file=out)
    emit(repo.list_all()[0], minus(all_fields(), ID), out, currency=currency)

    if len(iphones) >= 2:
        source, target = iphones[1], iphones[0]
        copy_fields(source, target, PRICE)
        print("after price copy:", file=out)
        emit(target, name_price, out, currency=currency)

    print("Done.", file=out)


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="catalog-demo",
        description="Field mask walkthrough over a small product catalog",
    )
    parser.add_argument("--currency", help="Currency symbol for the price label")

    args = parser.parse_args(argv)
    settings = CatalogSettings()
    if args.currency:
        settings = settings.model_copy(update={"currency_symbol": args.currency})

    run(settings, sys.stdout if out is None else out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
