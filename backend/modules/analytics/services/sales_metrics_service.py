# backend/modules/analytics/services/sales_metrics_service.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..schemas.analytics_schemas import SalesMetrics
from ..schemas.order_schemas import Order
from ..utils.money import ZERO, percentage_of, round_money, safe_divide


@dataclass
class SalesTotals:
    """Unrounded running totals over a set of orders"""

    total_sales: Decimal = ZERO
    total_orders: int = 0
    total_items: int = 0
    total_tax: Decimal = ZERO
    total_discounts: Decimal = ZERO
    total_tips: Decimal = ZERO
    total_delivery_fees: Decimal = ZERO
    total_cost: Decimal = ZERO

    @classmethod
    def from_orders(cls, orders: Iterable[Order]) -> "SalesTotals":
        totals = cls()
        for order in orders:
            totals.add(order)
        return totals

    def add(self, order: Order) -> None:
        self.total_sales += order.total_amount
        self.total_orders += 1
        self.total_items += order.item_count
        self.total_tax += order.tax_amount
        self.total_discounts += order.discount_amount
        self.total_tips += order.tip_amount
        self.total_delivery_fees += order.delivery_fee
        self.total_cost += order.cost_of_goods

    @property
    def average_order_value(self) -> Decimal:
        return safe_divide(self.total_sales, self.total_orders)

    @property
    def gross_profit(self) -> Decimal:
        return self.total_sales - self.total_cost


def calculate_sales_metrics(orders: Iterable[Order]) -> SalesMetrics:
    """
    Reduce orders to scalar sales aggregates.

    Average order value and profit margin are 0 when there is nothing to
    divide by, so an empty collection yields all-zero metrics.
    """
    totals = SalesTotals.from_orders(orders)

    return SalesMetrics(
        total_sales=round_money(totals.total_sales),
        total_orders=totals.total_orders,
        average_order_value=round_money(totals.average_order_value),
        total_items=totals.total_items,
        total_tax=round_money(totals.total_tax),
        total_discounts=round_money(totals.total_discounts),
        total_tips=round_money(totals.total_tips),
        total_delivery_fees=round_money(totals.total_delivery_fees),
        gross_profit=round_money(totals.gross_profit),
        profit_margin=percentage_of(totals.gross_profit, totals.total_sales),
    )
