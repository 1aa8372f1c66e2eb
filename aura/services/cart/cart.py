"""
Shopping cart.

An ordered list of product references. Lines are appended and removed by
position; the same product may appear more than once.
"""

from typing import List

from aura.schemas.catalog import Product


class Cart:
    """In-memory cart for one session."""

    def __init__(self):
        self._items: List[Product] = []

    @property
    def items(self) -> List[Product]:
        return list(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def subtotal(self) -> float:
        return sum(item.price for item in self._items)

    def add(self, product: Product) -> None:
        self._items.append(product)

    def remove(self, index: int) -> Product:
        """
        Remove the line at index.

        Raises:
            IndexError: If index is outside the cart
        """
        if index < 0 or index >= len(self._items):
            raise IndexError(f"Cart has no item at index {index}")
        return self._items.pop(index)
