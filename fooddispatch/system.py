"""Interactive order dispatch: orders queue up, drivers come off a min-heap."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

from .driver_heap import DriverMinHeap
from .models import Driver, Order, OrderStatus
from .order_queue import OrderQueue
from .order_table import OrderTable

_INT = re.compile(r"[+-]?\d+")
_WORD = re.compile(r"\S+")

DEFAULT_DRIVER_COUNT = 3
DEFAULT_DELIVERY_MINUTES = 30


class _ConsoleInput:
    """Reads whitespace-separated numbers and words, or whole lines, from a stream.

    A read that cannot be satisfied puts the reader in a failed state; every
    later read fails too until ``clear`` is called.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""
        self.failed = False
        self.at_eof = False

    def _fill(self) -> bool:
        if self._buf:
            return True
        if self.at_eof:
            return False
        line = self._stream.readline()
        if not line:
            self.at_eof = True
            return False
        self._buf = line
        return True

    def _skip_space(self) -> bool:
        while self._fill():
            stripped = self._buf.lstrip()
            if stripped:
                self._buf = stripped
                return True
            self._buf = ""
        return False

    def read_int(self) -> Optional[int]:
        if self.failed:
            return None
        if not self._skip_space():
            self.failed = True
            return None
        match = _INT.match(self._buf)
        if match is None:
            self.failed = True
            return None
        self._buf = self._buf[match.end():]
        return int(match.group())

    def read_word(self) -> str:
        if self.failed:
            return ""
        if not self._skip_space():
            self.failed = True
            return ""
        match = _WORD.match(self._buf)
        assert match is not None
        self._buf = self._buf[match.end():]
        return match.group()

    def read_line(self) -> str:
        if self.failed or not self._fill():
            self.failed = True
            return ""
        line, self._buf = self._buf, ""
        return line[:-1] if line.endswith("\n") else line

    def skip_line(self) -> None:
        if self.failed:
            return
        if self._fill():
            self._buf = ""

    def clear(self) -> None:
        self.failed = False


class FoodDeliverySystem:
    """Menu-driven food delivery dispatcher working on text streams."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self._input = _ConsoleInput(sys.stdin if stdin is None else stdin)
        self._out = sys.stdout if stdout is None else stdout
        self.pending_orders = OrderQueue()
        self.drivers = DriverMinHeap()
        self.orders = OrderTable()
        self.next_order_id = 1
        self.current_time = 0
        self.register_drivers()

    def _say(self, text: str) -> None:
        self._out.write(text)

    def register_drivers(self) -> None:
        """Ask how many drivers there are and register each, free at time 0."""
        self._say("Enter number of delivery drivers to register: ")
        count = self._input.read_int()
        if count is None or count <= 0:
            self._say(f"Invalid number. Defaulting to {DEFAULT_DRIVER_COUNT} drivers.\n")
            self._input.clear()
            self._input.skip_line()
            count = DEFAULT_DRIVER_COUNT

        for driver_id in range(1, count + 1):
            self._say(f"Enter name for driver {driver_id}: ")
            name = self._input.read_word()
            self.drivers.insert(Driver(driver_id, name, 0))

    def place_order(self) -> None:
        """Read a new order, record it and queue it for assignment."""
        self._input.skip_line()

        self._say("Enter customer name: ")
        name = self._input.read_line()
        self._say("Enter delivery address: ")
        address = self._input.read_line()
        self._say("Enter items (comma-separated): ")
        items = self._input.read_line()

        order = Order(self.next_order_id, name, address, items)
        self.orders.put(order.id, order)
        self.pending_orders.enqueue(order)

        self._say(f"Order placed successfully. Generated Order ID = {order.id}\n")
        self.next_order_id += 1

    def assign_next_order(self) -> None:
        """Give the oldest pending order to the driver who is free soonest."""
        if self.pending_orders.is_empty():
            self._say("No pending orders in the queue.\n")
            return
        if self.drivers.is_empty():
            self._say("No AVAILABLE drivers in the system.\n")
            return

        order = self.pending_orders.dequeue()
        driver = self.drivers.extract_min()

        self.current_time = max(self.current_time, driver.available_at)

        self._say(
            f"Assigning Order ID {order.id} to Driver {driver.name}"
            f" (Driver ID {driver.id}).\n"
        )
        self._say("Enter estimated minutes for this delivery: ")
        minutes = self._input.read_int()
        if minutes is None or minutes <= 0:
            self._say(f"Invalid time. Assuming {DEFAULT_DELIVERY_MINUTES} minutes.\n")
            self._input.clear()
            self._input.skip_line()
            minutes = DEFAULT_DELIVERY_MINUTES

        driver.available_at = self.current_time + minutes

        order.status = OrderStatus.ASSIGNED
        order.assigned_driver_id = driver.id
        order.assigned_driver = driver

        self.current_time += 1

        self._say(
            "Order assigned. Driver is now busy until simulated time "
            f"{driver.available_at}.\n"
        )

    def _read_order_id(self) -> int:
        order_id = self._input.read_int()
        return 0 if order_id is None else order_id

    def complete_delivery(self) -> None:
        """Mark an assigned order delivered and return its driver to the pool."""
        self._say("Enter Order ID to mark as delivered: ")
        order = self.orders.get(self._read_order_id())
        if order is None:
            self._say("Order not found.\n")
            return
        if order.status is OrderStatus.DELIVERED:
            self._say("Order is already delivered.\n")
            return
        if order.status is OrderStatus.PENDING:
            self._say("Order is still pending and has not been assigned yet.\n")
            return

        order.status = OrderStatus.DELIVERED
        self._say(f"Order ID {order.id} marked as DELIVERED successfully.\n")

        driver = order.assigned_driver
        if driver is None:
            self._say("Warning: No driver stored for this order.\n")
            return

        self.drivers.insert(driver)
        self._say(f"Driver {driver.id} is now free for new orders.\n")
        order.assigned_driver = None

    def view_order_summary(self) -> None:
        """Print one line for every order ever placed."""
        self._say("==== Order Summary (All Orders) ====\n")
        for line in self.orders.summary_lines():
            self._say(line + "\n")
        self._say("====================================\n")

    def track_order_by_id(self) -> None:
        """Print the full details of one order."""
        self._say("Enter Order ID to view details: ")
        order_id = self._read_order_id()
        order = self.orders.get(order_id)
        if order is None:
            self._say(f"No order found with ID {order_id}.\n")
            return

        rule = "------------------------------\n"
        self._say(rule)
        self._say(f"Order ID      : {order.id}\n")
        self._say(f"Customer Name : {order.customer_name}\n")
        self._say(f"Address       : {order.address}\n")
        self._say(f"Items         : {order.items}\n")
        self._say(f"Status        : {order.status}\n")
        if order.assigned_driver_id == -1:
            self._say("Driver        : Not assigned yet\n")
        else:
            line = f"Driver ID     : {order.assigned_driver_id}"
            if order.assigned_driver is not None:
                line += f" ({order.assigned_driver.name})"
            self._say(line + "\n")
        self._say(rule)

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""
        actions = {
            1: self.place_order,
            2: self.assign_next_order,
            3: self.complete_delivery,
            4: self.view_order_summary,
            5: self.track_order_by_id,
        }
        while True:
            self._say("\n=== Online Food Delivery Order System ===\n")
            self._say("1. Place New Order\n")
            self._say("2. Assign Next Order to Driver\n")
            self._say("3. Mark Order as Delivered\n")
            self._say("4. View All Orders Summary\n")
            self._say("5. Track Order by ID\n")
            self._say("6. Exit\n")
            self._say("Enter choice: ")

            choice = self._input.read_int()
            if choice is None:
                if self._input.at_eof:
                    return
                self._input.clear()
                self._input.skip_line()
                self._say("Invalid input.\n")
                continue

            if choice == 6:
                self._say("Exiting system. Goodbye!\n")
                return
            action = actions.get(choice)
            if action is None:
                self._say("Invalid choice. Try again.\n")
            else:
                action()