import pytest

from fooddispatch.models import Driver, Order, OrderStatus


def test_driver_defaults():
    driver = Driver()
    assert driver.id == -1
    assert driver.name == ""
    assert driver.available_at == 0


def test_driver_fields():
    driver = Driver(4, "Maya", 12)
    assert (driver.id, driver.name, driver.available_at) == (4, "Maya", 12)


def test_order_defaults():
    order = Order()
    assert order.id == -1
    assert order.customer_name == ""
    assert order.status is OrderStatus.PENDING
    assert order.assigned_driver_id == -1
    assert order.assigned_driver is None


def test_new_order_is_pending_and_unassigned():
    order = Order(7, "Ann", "1 Main St", "pizza, soda")
    assert order.id == 7
    assert order.customer_name == "Ann"
    assert order.address == "1 Main St"
    assert order.items == "pizza, soda"
    assert order.status is OrderStatus.PENDING
    assert order.assigned_driver_id == -1
    assert order.assigned_driver is None


@pytest.mark.parametrize(
    "status, text",
    [
        (OrderStatus.PENDING, "Pending"),
        (OrderStatus.ASSIGNED, "Assigned"),
        (OrderStatus.DELIVERED, "Delivered"),
    ],
)
def test_status_strings(status, text):
    order = Order(1, "Ann", "addr", "tea")
    order.status = status
    assert str(order.status) == text
    assert f"{order.status}" == text


def test_order_holds_driver_reference():
    driver = Driver(2, "Bob", 0)
    order = Order(1, "Ann", "addr", "tea")
    order.assigned_driver = driver
    order.assigned_driver_id = driver.id
    driver.available_at = 30
    assert order.assigned_driver.available_at == 30
    assert order.assigned_driver_id == 2