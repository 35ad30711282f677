import random

import pytest

from fooddispatch.driver_heap import DriverMinHeap
from fooddispatch.models import Driver


def test_new_heap_is_empty():
    heap = DriverMinHeap()
    assert heap.is_empty()
    assert len(heap) == 0
    assert heap.peek() is None


def test_extract_from_empty_raises():
    with pytest.raises(IndexError, match="heap empty"):
        DriverMinHeap().extract_min()


def test_peek_returns_minimum_without_removing():
    heap = DriverMinHeap()
    late = Driver(1, "A", 50)
    early = Driver(2, "B", 5)
    heap.insert(late)
    heap.insert(early)
    assert heap.peek() is early
    assert len(heap) == 2


def test_extract_in_available_order():
    heap = DriverMinHeap()
    drivers = [Driver(i, f"d{i}", t) for i, t in enumerate([40, 10, 30, 20, 0])]
    for d in drivers:
        heap.insert(d)
    extracted = [heap.extract_min() for _ in range(len(drivers))]
    assert [d.available_at for d in extracted] == [0, 10, 20, 30, 40]
    assert heap.is_empty()


def test_extract_returns_same_objects():
    heap = DriverMinHeap()
    driver = Driver(3, "C", 7)
    heap.insert(driver)
    assert heap.extract_min() is driver


def test_grows_past_many_inserts_and_stays_ordered():
    rng = random.Random(1234)
    heap = DriverMinHeap()
    times = [rng.randint(0, 500) for _ in range(200)]
    for i, t in enumerate(times):
        heap.insert(Driver(i, "x", t))
    assert len(heap) == 200
    out = [heap.extract_min().available_at for _ in range(200)]
    assert out == sorted(times)


def test_reinsert_after_update():
    heap = DriverMinHeap()
    a = Driver(1, "A", 0)
    b = Driver(2, "B", 0)
    heap.insert(a)
    heap.insert(b)
    first = heap.extract_min()
    first.available_at = 100
    heap.insert(first)
    second = heap.extract_min()
    assert second is not first
    assert heap.extract_min() is first


def test_interleaved_operations_keep_min():
    rng = random.Random(99)
    heap = DriverMinHeap()
    pending = []
    observed = []
    next_id = 0
    for _ in range(60):
        for _ in range(3):
            t = rng.randint(0, 50)
            heap.insert(Driver(next_id, "x", t))
            pending.append(t)
            next_id += 1
        expected_min = min(pending)
        got = heap.extract_min().available_at
        observed.append((got, expected_min))
        pending.remove(expected_min)
    assert all(got == expected for got, expected in observed)
    assert len(observed) == 60
    assert len(heap) == len(pending) == 120