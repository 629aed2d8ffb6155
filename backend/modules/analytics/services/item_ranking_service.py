# backend/modules/analytics/services/item_ranking_service.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from ..schemas.analytics_schemas import TopPerformingItem
from ..schemas.order_schemas import Order, OrderItem
from ..utils.money import ZERO, percentage_of, round_money, safe_divide


@dataclass
class _ItemTotals:
    menu_item_id: str
    name: str
    category: str
    total_sales: Decimal = ZERO
    total_quantity: int = 0
    order_count: int = 0
    total_cost: Decimal = ZERO
    total_profit: Decimal = ZERO

    def add(self, item: OrderItem) -> None:
        self.total_sales += item.subtotal
        self.total_quantity += item.quantity
        self.order_count += 1
        self.total_cost += item.line_cost
        self.total_profit += item.line_profit


def get_top_items(orders: Iterable[Order], limit: int = 10) -> List[TopPerformingItem]:
    """
    Menu items ranked by revenue.

    Profit figures come from the sale-time snapshot of each line, so later
    catalog changes do not alter historical rankings. Items with equal
    revenue keep the order in which they were first seen.
    """
    # dicts keep insertion order, which is the first-seen order
    totals: Dict[str, _ItemTotals] = {}
    for order in orders:
        for item in order.items:
            entry = totals.get(item.menu_item_id)
            if entry is None:
                entry = totals[item.menu_item_id] = _ItemTotals(
                    menu_item_id=item.menu_item_id,
                    name=item.menu_item.name,
                    category=item.menu_item.category,
                )
            entry.add(item)

    # sorted() is stable, also with reverse=True
    ranked = sorted(totals.values(), key=lambda entry: entry.total_sales, reverse=True)

    return [
        TopPerformingItem(
            menu_item_id=entry.menu_item_id,
            name=entry.name,
            category=entry.category,
            total_sales=round_money(entry.total_sales),
            total_quantity=entry.total_quantity,
            order_count=entry.order_count,
            average_price=round_money(
                safe_divide(entry.total_sales, entry.total_quantity)
            ),
            profit_margin=percentage_of(
                entry.total_sales - entry.total_cost, entry.total_sales
            ),
            total_profit=round_money(entry.total_profit),
            rank=position,
        )
        for position, entry in enumerate(ranked[:max(limit, 0)], start=1)
    ]
