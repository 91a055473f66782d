"""A bag of integers that yields its elements most recent first."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Bag:
    """An unordered collection where each new element goes to the front."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def add(self, elem: int) -> None:
        """Put an element at the front of the bag."""
        self._items.appendleft(elem)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Bag({list(self._items)!r})"