"""First-in, first-out queue of pending orders."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .models import Order


class OrderQueue:
    """FIFO queue of orders waiting for a driver."""

    def __init__(self) -> None:
        self._items: Deque[Order] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, order: Order) -> None:
        self._items.append(order)

    def dequeue(self) -> Order:
        """Remove and return the oldest order."""
        if not self._items:
            raise IndexError("Queue underflow: no pending orders.")
        return self._items.popleft()

    def peek(self) -> Optional[Order]:
        """Return the oldest order without removing it, or None."""
        return self._items[0] if self._items else None