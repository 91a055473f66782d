"""Products compared by price and weight."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Product:
    """A named item with a price and a weight."""

    name: str
    price: float
    weight: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.price == other.price and self.weight == other.weight

    def __lt__(self, other: Product) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.price < other.price and self.weight < other.weight

    def __hash__(self) -> int:
        return hash((self.price, self.weight))


def compare_by_value(first: Product, second: Product) -> bool:
    """True when the first product's price per weight is at least the second's."""
    return first.price / first.weight >= second.price / second.weight