"""Static product catalog and named products."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from coffee_order.constant import ADDIN, COFFEE, PRODUCT_META_BY_ID as _PRODUCT_META_BY_ID_RAW
from coffee_order.models import Addin, Coffee


@dataclass(frozen=True)
class CatalogEntry:
    """Canonical metadata for a sellable product."""

    product_id: str
    name: str
    price: Decimal
    kind: str


CATALOG: dict[str, CatalogEntry] = {
    product_id: CatalogEntry(
        product_id=product_id,
        name=meta["name"],
        price=Decimal(meta["price"]),
        kind=meta["kind"],
    )
    for product_id, meta in _PRODUCT_META_BY_ID_RAW.items()
}


def _entry_for(product_id: str, kind: str) -> CatalogEntry:
    entry = CATALOG.get(product_id)
    if entry is None:
        raise ValueError(f"Unknown product id: {product_id!r}")
    if entry.kind != kind:
        raise ValueError(f"Product {product_id!r} is a {entry.kind}, expected a {kind}")
    return entry


def new_coffee(product_id: str) -> Coffee:
    """Build a fresh coffee from its catalog entry."""
    entry = _entry_for(product_id, COFFEE)
    return Coffee(entry.name, entry.price)


def new_addin(product_id: str) -> Addin:
    """Build a fresh add-in from its catalog entry."""
    entry = _entry_for(product_id, ADDIN)
    return Addin(entry.name, entry.price)


class TurkishCoffee(Coffee):
    """Turkish coffee from the catalog."""

    def __init__(self) -> None:
        entry = CATALOG["turkish_coffee"]
        super().__init__(entry.name, entry.price)


class FranceCoffee(Coffee):
    """France coffee from the catalog."""

    def __init__(self) -> None:
        entry = CATALOG["france_coffee"]
        super().__init__(entry.name, entry.price)


class Sugar(Addin):
    """Sugar add-in from the catalog."""

    def __init__(self) -> None:
        entry = CATALOG["sugar"]
        super().__init__(entry.name, entry.price)


class Milk(Addin):
    """Milk add-in from the catalog."""

    def __init__(self) -> None:
        entry = CATALOG["milk"]
        super().__init__(entry.name, entry.price)
