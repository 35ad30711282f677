# fooddispatch

An interactive terminal system for running a small food delivery service.
Orders wait in a first-in, first-out queue. Each order goes to the driver who
becomes free the soonest in simulated time. You can look up any order by its
ID, and marking an order as delivered puts its driver back in the pool.

## Installation

```
pip install .
```

## Running

```
fooddispatch
```

The command takes no options apart from `--help`. It reads from standard input
and writes to standard output.

The program first asks how many drivers to register and then the name of each
one. A name is a single word. If the count is not a positive number, three
drivers are registered. It then shows a menu:

```
=== Online Food Delivery Order System ===
1. Place New Order
2. Assign Next Order to Driver
3. Mark Order as Delivered
4. View All Orders Summary
5. Track Order by ID
6. Exit
```

- **Place New Order** asks for a customer name, a delivery address and a
  comma-separated list of items, one line each. Each order gets the next ID,
  counting up from 1.
- **Assign Next Order to Driver** takes the oldest pending order and gives it
  to the driver who is available earliest. It asks for the estimated minutes
  for the delivery. Anything that is not a positive number counts as 30
  minutes. The driver is then busy until the current simulated time plus
  those minutes. Each assignment moves the simulated clock on by one unit.
- **Mark Order as Delivered** marks an assigned order as delivered and puts its
  driver back in the pool of available drivers. Pending or already delivered
  orders are reported and left unchanged.
- **View All Orders Summary** lists every order with its status and driver.
- **Track Order by ID** shows the full details of a single order.

Input that is not a number at the menu prints `Invalid input.` The program
ends when you choose 6 or when standard input runs out.

## Using it from Python

You can import the building blocks on their own:

```python
from fooddispatch.models import Driver, Order, OrderStatus
from fooddispatch.driver_heap import DriverMinHeap
from fooddispatch.order_queue import OrderQueue
from fooddispatch.order_table import OrderTable
```

- `Driver` and `Order` are dataclasses. `OrderStatus` has the members
  `PENDING`, `ASSIGNED` and `DELIVERED`, and `str()` of a member gives
  `Pending`, `Assigned` or `Delivered`.
- `DriverMinHeap` keeps drivers ordered by `available_at`. It has `insert`,
  `peek`, `extract_min`, `is_empty` and `len()`. `extract_min` on an empty heap
  raises `IndexError`.
- `OrderQueue` has `enqueue`, `dequeue`, `peek`, `is_empty` and `len()`.
  `dequeue` on an empty queue raises `IndexError`.
- `OrderTable` is a chained hash table from order ID to order. It has `put`,
  `get` (which returns `None` for a missing ID), `remove`, `in`, `len()`,
  iteration over its keys, and `summary_lines()`, which returns the lines
  printed by the summary menu entry.

`FoodDeliverySystem` in `fooddispatch.system` takes the text streams it reads
from and writes to, so you can drive it from a script or a test. Driver
registration happens as soon as it is created:

```python
import io
from fooddispatch.system import FoodDeliverySystem

commands = io.StringIO("1\nAda\n1\nBob\n1 Main St\npizza\n2\n25\n6\n")
output = io.StringIO()
FoodDeliverySystem(commands, output).run()
print(output.getvalue())
```

`fooddispatch.cli.main()` runs the same system on standard input and output.

## Limitations

Everything is kept in memory. Orders and drivers are not saved anywhere and
are gone when the program exits. Time is a simulated counter, not the clock.

## Running the tests

```
pip install .[test]
pytest
```