"""Console rendering helpers for orders."""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from coffee_order.config import ORDER_HEADER
from coffee_order.models import Addin, Coffee, Orderable, Order, format_amount


def badge_style(item: Orderable) -> str:
    """Return a consistent style for each kind of order participant."""
    if isinstance(item, Coffee):
        return "bold #ffffff on #6f4e37"
    if isinstance(item, Addin):
        return "bold #0b1f0f on #e8d8b0"
    return "bold"


def _node_name(item: Orderable) -> str:
    # Nested add-ins appear as child nodes, so coffees show only their own name.
    if isinstance(item, (Coffee, Addin)):
        return item.name
    if isinstance(item, Order):
        return ORDER_HEADER
    return type(item).__name__


def _label(item: Orderable) -> Text:
    name = _node_name(item)
    text = Text()
    text.append(name, style=badge_style(item))
    text.append(f"  {format_amount(item.amount)}", style="dim")
    return text


def format_order_summary(order: Order) -> Text:
    """Render the order title with its item count and total."""
    text = Text(order.title)
    text.append("\n")
    text.append(f"Items: {order.count}", style="bold")
    text.append("\n")
    text.append(f"Total: {format_amount(order.amount)}", style="bold green")
    return text


def build_order_tree(order: Order) -> Tree:
    """Render the composite as a tree with one node per participant."""
    tree = Tree(_label(order))

    def attach(node: Tree, parent: Orderable) -> None:
        for child in parent.children:
            attach(node.add(_label(child)), child)

    attach(tree, order)
    return tree
