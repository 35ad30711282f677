"""Min-heap of available drivers ordered by their next available time."""

from __future__ import annotations

from typing import List, Optional

from .models import Driver


class DriverMinHeap:
    """Binary min-heap keyed on ``Driver.available_at``."""

    def __init__(self) -> None:
        self._data: List[Driver] = []

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def insert(self, driver: Driver) -> None:
        """Add an available driver."""
        self._data.append(driver)
        self._sift_up(len(self._data) - 1)

    def peek(self) -> Optional[Driver]:
        """Return the next available driver without removing it, or None."""
        return self._data[0] if self._data else None

    def extract_min(self) -> Driver:
        """Remove and return the driver with the lowest available time."""
        if not self._data:
            raise IndexError("No drivers available (heap empty).")
        last = self._data.pop()
        if not self._data:
            return last
        smallest = self._data[0]
        self._data[0] = last
        self._sift_down(0)
        return smallest

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if data[idx].available_at < data[parent].available_at:
                data[idx], data[parent] = data[parent], data[idx]
                idx = parent
            else:
                break

    def _sift_down(self, idx: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * idx + 1
            right = left + 1
            smallest = idx
            if left < size and data[left].available_at < data[smallest].available_at:
                smallest = left
            if right < size and data[right].available_at < data[smallest].available_at:
                smallest = right
            if smallest == idx:
                break
            data[idx], data[smallest] = data[smallest], data[idx]
            idx = smallest