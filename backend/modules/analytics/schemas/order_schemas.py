# backend/modules/analytics/schemas/order_schemas.py

"""
Validated order entities consumed by the analytics engine.

Provider and repository payloads are validated into these models at the
repository boundary. Models are frozen and collections are tuples, so an
order and its sale-time menu snapshots stay as they were recorded.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..constants import OrderChannel, OrderStatus, PaymentMethod, DiscountType


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MenuItemSnapshot(_FrozenModel):
    """Menu item as it was priced at the time of sale"""

    id: Optional[str] = None
    name: str
    category: str
    base_price: Optional[Decimal] = Field(None, ge=0)
    cost: Decimal = Field(..., ge=0, description="Unit cost at time of sale")
    profit: Optional[Decimal] = Field(
        None, description="Unit profit at time of sale; unit price minus cost if omitted"
    )


class OrderItemModifier(_FrozenModel):
    name: str
    price: Decimal


class OrderItem(_FrozenModel):
    """One line within an order"""

    id: Optional[str] = None
    menu_item_id: str
    menu_item: MenuItemSnapshot
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)
    subtotal: Decimal = Field(..., ge=0, description="Line total net of item modifiers")
    modifiers: Tuple[OrderItemModifier, ...] = ()

    @property
    def unit_profit(self) -> Decimal:
        if self.menu_item.profit is not None:
            return self.menu_item.profit
        return self.unit_price - self.menu_item.cost

    @property
    def line_cost(self) -> Decimal:
        return self.menu_item.cost * self.quantity

    @property
    def line_profit(self) -> Decimal:
        return self.unit_profit * self.quantity


class Order(_FrozenModel):
    """One completed or in-progress transaction"""

    id: str
    order_number: str
    location_id: str
    location_name: str
    channel: OrderChannel
    status: OrderStatus = OrderStatus.COMPLETED
    items: Tuple[OrderItem, ...] = ()

    # Financial
    subtotal: Decimal = Field(..., ge=0)
    tax_rate: Decimal = Field(Decimal("0"), ge=0)
    tax_amount: Decimal = Field(Decimal("0"), ge=0)
    discount_amount: Decimal = Field(Decimal("0"), ge=0)
    discount_type: Optional[DiscountType] = None
    discount_reason: Optional[str] = None
    tip_amount: Decimal = Field(Decimal("0"), ge=0)
    delivery_fee: Decimal = Field(Decimal("0"), ge=0)
    total_amount: Decimal = Field(..., ge=0)
    payment_method: PaymentMethod

    # Customer / service details
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    table_number: Optional[str] = None
    notes: Optional[str] = None
    staff_id: Optional[str] = None
    staff_name: Optional[str] = None
    preparation_time: Optional[int] = Field(None, ge=0, description="Minutes")

    # Timestamps
    created_at: datetime
    completed_at: Optional[datetime] = None

    @field_validator("created_at", "completed_at")
    @classmethod
    def assume_utc_when_naive(cls, v):
        # Naive provider timestamps are treated as UTC, never host-local time
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def cost_of_goods(self) -> Decimal:
        return sum((item.line_cost for item in self.items), Decimal("0"))

    @property
    def item_profit(self) -> Decimal:
        """Sum of sale-time unit profit times quantity over all lines"""
        return sum((item.line_profit for item in self.items), Decimal("0"))
