"""
Decorator: add-ons wrap a coffee and extend its description and price.

Decorators are plain functions from ``Coffee`` to ``Coffee`` built with
``add_on``; they compose in the order they are applied.
"""

from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from typing import Callable, List, Tuple

Component = Tuple[str, Decimal]


@dataclass(frozen=True)
class Coffee:
    """An immutable coffee made of ordered ``(label, price)`` layers."""

    components: Tuple[Component, ...]

    @property
    def description(self) -> str:
        return " ".join(label for label, _ in self.components)

    @property
    def price(self) -> Decimal:
        return sum((price for _, price in self.components), Decimal("0"))

    def price_breakdown(self) -> List[str]:
        return [f"{label} Price ${price}" for label, price in self.components]


CoffeeDecorator = Callable[[Coffee], Coffee]


def simple_coffee() -> Coffee:
    return Coffee(components=(("Simple Coffee", Decimal("5")),))


def add_on(label: str, price) -> CoffeeDecorator:
    """Build a decorator that appends one layer to a coffee."""
    layer = (label, Decimal(str(price)))

    def decorate(coffee: Coffee) -> Coffee:
        return Coffee(components=coffee.components + (layer,))

    decorate.__name__ = f"with_{label.lower().replace(' ', '_')}"
    return decorate


with_milk = add_on("Milk", 2)
with_sugar = add_on("Sugar", 1)


def decorate(coffee: Coffee, *decorators: CoffeeDecorator) -> Coffee:
    """Apply decorators left to right."""
    return reduce(lambda wrapped, decorator: decorator(wrapped), decorators, coffee)


def demo() -> List[str]:
    coffee = decorate(simple_coffee(), with_milk, with_sugar)
    return [coffee.description, *coffee.price_breakdown(), f"Total ${coffee.price}"]


def main() -> None:
    for line in demo():
        print(line)


if __name__ == "__main__":
    main()
