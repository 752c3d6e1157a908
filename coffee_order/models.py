"""Domain models for coffee-order."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, TypeVar

from coffee_order.config import CURRENCY_SYMBOL, ORDER_HEADER, ORDER_LINE_PREFIX

logger = logging.getLogger(__name__)

PriceLike = Decimal | int | float | str

AttachableT = TypeVar("AttachableT", bound="Attachable")


def to_decimal(value: PriceLike) -> Decimal:
    """Convert a price to Decimal through its string form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(amount: Decimal) -> str:
    """Render an amount with the currency symbol and no rounding."""
    return f"{CURRENCY_SYMBOL}{amount}"


class Orderable(ABC):
    """Anything that can take part in an order."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Human readable description."""

    @property
    @abstractmethod
    def amount(self) -> Decimal:
        """Total price, including any children."""

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of items this participant stands for."""

    @property
    @abstractmethod
    def children(self) -> tuple[Orderable, ...]:
        """Directly owned participants, in insertion order."""


class Attachable(Orderable):
    """
    An orderable that owns child orderables and aggregates over them.

    Children are matched by identity, never by value, so two equal-looking
    add-ins attached to the same coffee stay independently removable.
    """

    def __init__(self) -> None:
        self._items: list[Orderable] = []

    def add_item(self: AttachableT, item: Orderable) -> AttachableT:
        """Append a child and return self for chaining."""
        self._items.append(item)
        logger.debug("Attached %r to %r", item, self)
        return self

    def remove_item(self: AttachableT, item: Orderable) -> AttachableT:
        """Drop the first child that is `item`; a missing item is ignored."""
        for idx, child in enumerate(self._items):
            if child is item:
                del self._items[idx]
                logger.debug("Detached %r from %r", item, self)
                break
        return self

    @property
    def children(self) -> tuple[Orderable, ...]:
        return tuple(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def amount(self) -> Decimal:
        return sum((child.amount for child in self._items), Decimal(0))

    def walk(self) -> Iterator[Orderable]:
        """Yield every descendant depth-first, parents before their children."""
        for child in self._items:
            yield child
            if isinstance(child, Attachable):
                yield from child.walk()

    def __iter__(self) -> Iterator[Orderable]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class PricedItem:
    """A name and unit price pair shared by the priced order types."""

    name: str = ""
    price: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        self.price = to_decimal(self.price)

    def set_name(self, name: str) -> PricedItem:
        self.name = name
        return self

    def set_price(self, price: PriceLike) -> PricedItem:
        self.price = to_decimal(price)
        return self


class Addin(Orderable):
    """A leaf extra such as sugar or milk."""

    def __init__(self, name: str = "", price: PriceLike = 0) -> None:
        self.item = PricedItem(name, to_decimal(price))

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def price(self) -> Decimal:
        return self.item.price

    def set_name(self, name: str) -> Addin:
        self.item.set_name(name)
        return self

    def set_price(self, price: PriceLike) -> Addin:
        self.item.set_price(price)
        return self

    @property
    def title(self) -> str:
        return self.item.name

    @property
    def amount(self) -> Decimal:
        return self.item.price

    @property
    def count(self) -> int:
        return 1

    @property
    def children(self) -> tuple[Orderable, ...]:
        return ()

    def __repr__(self) -> str:
        return f"Addin(name={self.name!r}, price={self.price!r})"


class Coffee(Attachable):
    """A priced coffee that can carry add-ins."""

    def __init__(self, name: str = "", price: PriceLike = 0) -> None:
        super().__init__()
        self.item = PricedItem(name, to_decimal(price))

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def price(self) -> Decimal:
        return self.item.price

    def set_name(self, name: str) -> Coffee:
        self.item.set_name(name)
        return self

    def set_price(self, price: PriceLike) -> Coffee:
        self.item.set_price(price)
        return self

    @property
    def title(self) -> str:
        if not self._items:
            return self.item.name
        extras = " and ".join(child.title for child in self._items)
        return f"{self.item.name} with {extras}"

    @property
    def amount(self) -> Decimal:
        return self.item.price + super().amount

    @property
    def count(self) -> int:
        return 1 + sum(child.count for child in self._items)

    def __repr__(self) -> str:
        return f"Coffee(name={self.name!r}, price={self.price!r}, items={len(self._items)})"


class Order(Attachable):
    """A top-level order; it has no price of its own."""

    @property
    def title(self) -> str:
        lines = [ORDER_HEADER]
        for child in self._items:
            lines.append(f"{ORDER_LINE_PREFIX}{child.title} : {format_amount(child.amount)}")
        return "\n".join(lines)

    @property
    def count(self) -> int:
        return sum(child.count for child in self._items)

    def __repr__(self) -> str:
        return f"Order(items={len(self._items)})"
