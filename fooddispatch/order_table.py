"""Chained hash table mapping order ids to orders."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .models import Order

_MAX_LOAD = 0.75


class OrderTable:
    """Separate-chaining hash table of orders keyed by id.

    Iteration visits buckets in index order and, within a bucket, the most
    recently inserted entry first.
    """

    def __init__(self, initial_size: int = 101) -> None:
        if initial_size < 1:
            raise ValueError("initial_size must be at least 1")
        self._buckets: List[List[Tuple[int, Order]]] = [[] for _ in range(initial_size)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.get(key) is not None

    def __iter__(self) -> Iterator[int]:
        return (key for key, _ in self._entries())

    def _index(self, key: int) -> int:
        return abs(key) % len(self._buckets)

    def _entries(self) -> Iterator[Tuple[int, Order]]:
        for bucket in self._buckets:
            yield from bucket

    def _insert_new(self, key: int, order: Order) -> None:
        self._buckets[self._index(key)].insert(0, (key, order))
        self._count += 1

    def _rehash(self) -> None:
        old_entries = list(self._entries())
        self._buckets = [[] for _ in range(len(self._buckets) * 2 + 1)]
        self._count = 0
        for key, order in old_entries:
            self._insert_new(key, order)

    def put(self, key: int, order: Order) -> None:
        """Add an order, or replace the one stored under ``key``."""
        if self._count / len(self._buckets) > _MAX_LOAD:
            self._rehash()
        bucket = self._buckets[self._index(key)]
        for pos, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[pos] = (key, order)
                return
        self._insert_new(key, order)

    def get(self, key: int) -> Optional[Order]:
        """Return the order stored under ``key``, or None."""
        for existing, order in self._buckets[self._index(key)]:
            if existing == key:
                return order
        return None

    def remove(self, key: int) -> None:
        """Delete the entry for ``key``; a missing key is ignored."""
        bucket = self._buckets[self._index(key)]
        for pos, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[pos]
                self._count -= 1
                return

    def summary_lines(self) -> List[str]:
        """One line per stored order, in table order."""
        lines = []
        for _, order in self._entries():
            line = (
                f"Order ID: {order.id} | Customer: {order.customer_name}"
                f" | Status: {order.status}"
            )
            if order.assigned_driver_id == -1:
                line += " | Driver: (Not assigned)"
            else:
                line += f" | Driver ID: {order.assigned_driver_id}"
                if order.assigned_driver is not None:
                    line += f" ({order.assigned_driver.name})"
            lines.append(line)
        return lines