"""Entry point printing the sample coffee order."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from coffee_order.catalog import FranceCoffee, Milk, Sugar, TurkishCoffee
from coffee_order.config import LOG_LEVEL
from coffee_order.models import Order
from coffee_order.rendering import build_order_tree, format_order_summary

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def build_sample_order() -> Order:
    """Build two coffees with their add-ins and put them on one order."""
    turkish = TurkishCoffee()
    turkish.add_item(Sugar())
    turkish.add_item(Milk())

    france = FranceCoffee()
    france.add_item(Milk())

    order = Order()
    order.add_item(turkish)
    order.add_item(france)
    return order


def main() -> None:
    """Print the sample order's title, item count and total."""
    configure_logging()
    order = build_sample_order()
    logger.info("Built sample order with %d items", order.count)

    console = Console()
    console.print(format_order_summary(order))
    console.print(build_order_tree(order))


if __name__ == "__main__":
    main()
