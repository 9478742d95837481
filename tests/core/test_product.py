"""Tests for the Product entity and its field symbols."""

import pytest

from fieldmask import Category, Product, ProductField, UnknownFieldError


def test_fields_iterate_in_canonical_order():
    """Enum definition order is the rendering order."""
    assert list(ProductField) == [
        ProductField.ID,
        ProductField.NAME,
        ProductField.PRICE,
        ProductField.CATEGORY,
        ProductField.IN_STOCK,
    ]


def test_field_bits_follow_position():
    assert [f.bit for f in ProductField] == [1, 2, 4, 8, 16]


@pytest.mark.parametrize(
    ("field", "attribute", "label"),
    [
        (ProductField.ID, "id", "id"),
        (ProductField.NAME, "name", "name"),
        (ProductField.PRICE, "price", "price(€)"),
        (ProductField.CATEGORY, "category", "category"),
        (ProductField.IN_STOCK, "in_stock", "inStock"),
    ],
)
def test_field_attribute_and_label(field, attribute, label):
    assert field.attribute == attribute
    assert field.label() == label


def test_price_label_takes_currency():
    assert ProductField.PRICE.label("$") == "price($)"
    assert ProductField.NAME.label("$") == "name"


@pytest.mark.parametrize("name", ["IN_STOCK", "in_stock", "inStock"])
def test_parse_accepts_member_attribute_and_label(name):
    assert ProductField.parse(name) is ProductField.IN_STOCK


@pytest.mark.parametrize("name", ["", "Name", "stock", "price (€)", "ids"])
def test_parse_rejects_unknown_names(name):
    """Unknown selectors fail fast instead of matching nothing."""
    with pytest.raises(UnknownFieldError):
        ProductField.parse(name)


def test_unknown_field_error_is_value_error():
    assert issubclass(UnknownFieldError, ValueError)


def test_product_fields_are_mutable(iphone):
    iphone.id = 7
    iphone.name = "iPhone 17 Pro"
    iphone.price = 1499.5
    iphone.category = Category.ENTERPRISE
    iphone.in_stock = False

    assert iphone.snapshot() == (7, "iPhone 17 Pro", 1499.5, Category.ENTERPRISE, False)


def test_products_with_equal_fields_are_equal():
    a = Product(1, "iPad 10", 579.0, Category.STANDARD, True)
    b = Product(1, "iPad 10", 579.0, Category.STANDARD, True)

    assert a == b
    assert a is not b


def test_get_and_set_by_field(iphone):
    assert iphone.get(ProductField.CATEGORY) is Category.PREMIUM

    iphone.set(ProductField.IN_STOCK, False)

    assert iphone.in_stock is False
