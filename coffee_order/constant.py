"""Editable static product configuration."""

from __future__ import annotations

COFFEE = "coffee"
ADDIN = "addin"

# Prices are kept as strings so they convert to Decimal without float noise.
PRODUCT_META_BY_ID: dict[str, dict[str, str]] = {
    "turkish_coffee": {"name": "Turkish Coffee", "price": "5", "kind": COFFEE},
    "france_coffee": {"name": "France Coffee", "price": "7", "kind": COFFEE},
    "sugar": {"name": "Sugar", "price": "0.2", "kind": ADDIN},
    "milk": {"name": "Milk", "price": "0.7", "kind": ADDIN},
}
