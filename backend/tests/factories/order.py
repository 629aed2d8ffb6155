# backend/tests/factories/order.py

import factory
from factory import Faker, Sequence, LazyAttribute, LazyFunction, SubFactory
from datetime import datetime, timezone
from decimal import Decimal

from modules.analytics.constants import OrderChannel, OrderStatus, PaymentMethod
from modules.analytics.schemas.order_schemas import (
    MenuItemSnapshot,
    Order,
    OrderItem,
)


class MenuItemSnapshotFactory(factory.Factory):
    """Factory for sale-time menu item snapshots."""

    class Meta:
        model = MenuItemSnapshot

    id = Sequence(lambda n: f"item-{n + 1}")
    name = Faker("catch_phrase")
    category = factory.Iterator(["Appetizers", "Main Courses", "Desserts", "Beverages"])
    base_price = Decimal("10.00")
    cost = Decimal("4.00")
    profit = None


class OrderItemFactory(factory.Factory):
    """Factory for order lines."""

    class Meta:
        model = OrderItem

    menu_item = SubFactory(MenuItemSnapshotFactory)
    menu_item_id = LazyAttribute(lambda obj: obj.menu_item.id)

    # Quantity and pricing
    quantity = 1
    unit_price = LazyAttribute(lambda obj: obj.menu_item.base_price or Decimal("10.00"))
    subtotal = LazyAttribute(lambda obj: obj.unit_price * obj.quantity)


class OrderFactory(factory.Factory):
    """Factory for completed orders."""

    class Meta:
        model = Order

    id = Sequence(lambda n: f"order-{n + 1}")
    order_number = Sequence(lambda n: f"ORD-{n + 1:05d}")

    # Location / channel
    location_id = "loc-1"
    location_name = "Downtown"
    channel = OrderChannel.DINE_IN
    status = OrderStatus.COMPLETED

    items = LazyFunction(lambda: [OrderItemFactory()])

    # Financial
    subtotal = LazyAttribute(
        lambda obj: sum((item.subtotal for item in obj.items), Decimal("0"))
    )
    total_amount = LazyAttribute(lambda obj: obj.subtotal)
    payment_method = PaymentMethod.CARD

    # Customer info (optional)
    customer_name = Faker("name")

    created_at = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_item(name, category, quantity, unit_price, cost, profit=None, item_id=None):
    """Order line with an explicit snapshot; amounts may be given as strings."""
    snapshot = MenuItemSnapshotFactory(
        id=item_id or f"menu-{name.lower().replace(' ', '-')}",
        name=name,
        category=category,
        base_price=Decimal(str(unit_price)),
        cost=Decimal(str(cost)),
        profit=Decimal(str(profit)) if profit is not None else None,
    )
    return OrderItemFactory(
        menu_item=snapshot,
        quantity=quantity,
        unit_price=Decimal(str(unit_price)),
    )


def make_order(total, created_at, channel=OrderChannel.DINE_IN, location_id="loc-1",
               location_name="Downtown", items=None, **kwargs):
    """Order with an explicit total and timestamp."""
    if items is None:
        items = [make_item("House Salad", "Appetizers", 1, total, 0)]
    return OrderFactory(
        total_amount=Decimal(str(total)),
        created_at=created_at,
        channel=channel,
        location_id=location_id,
        location_name=location_name,
        items=items,
        **kwargs,
    )
