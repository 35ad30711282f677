"""Core records of the delivery system: drivers, orders and order states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class Driver:
    """A delivery driver and the simulated time at which they are next free."""

    id: int = -1
    name: str = ""
    available_at: int = 0


class OrderStatus(Enum):
    """Lifecycle of an order."""

    PENDING = "Pending"
    ASSIGNED = "Assigned"
    DELIVERED = "Delivered"

    def __str__(self) -> str:
        return self.value


@dataclass
class Order:
    """A customer order and, once assigned, the driver handling it."""

    id: int = -1
    customer_name: str = ""
    address: str = ""
    items: str = ""
    status: OrderStatus = OrderStatus.PENDING
    assigned_driver_id: int = -1
    assigned_driver: Optional[Driver] = None