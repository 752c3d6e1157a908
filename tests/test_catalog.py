from decimal import Decimal

import pytest

from coffee_order.catalog import CATALOG, FranceCoffee, Milk, Sugar, TurkishCoffee, new_addin, new_coffee
from coffee_order.models import Addin, Coffee


def test_catalog_entries_use_decimal_prices():
    assert CATALOG["milk"].price == Decimal("0.7")
    assert CATALOG["turkish_coffee"].kind == "coffee"


def test_named_products():
    assert TurkishCoffee().title == "Turkish Coffee"
    assert TurkishCoffee().price == Decimal("5")
    assert FranceCoffee().amount == Decimal("7")
    assert Sugar().amount == Decimal("0.2")
    assert Milk().title == "Milk"


def test_named_products_are_independent_instances():
    first, second = Sugar(), Sugar()
    coffee = TurkishCoffee().add_item(first).add_item(second)
    coffee.remove_item(first)
    assert coffee.children == (second,)


def test_new_coffee_and_addin():
    coffee = new_coffee("france_coffee")
    milk = new_addin("milk")
    assert isinstance(coffee, Coffee)
    assert isinstance(milk, Addin)
    assert coffee.add_item(milk).amount == Decimal("7.7")


def test_unknown_product_raises():
    with pytest.raises(ValueError, match="Unknown product id"):
        new_coffee("latte_macchiato")


def test_wrong_kind_raises():
    with pytest.raises(ValueError, match="expected a coffee"):
        new_coffee("sugar")
    with pytest.raises(ValueError, match="expected a addin"):
        new_addin("turkish_coffee")
