# backend/modules/analytics/services/location_performance_service.py

from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..constants import CHANNEL_ORDER, OrderChannel
from ..schemas.analytics_schemas import LocationPerformance
from ..schemas.order_schemas import Order
from ..utils.money import ZERO, growth_rate, percentage_of, round_money, safe_divide


@dataclass
class _LocationTotals:
    location_id: str
    location_name: str
    sales: Decimal = ZERO
    orders: int = 0
    profit: Decimal = ZERO
    channel_counts: Counter = field(default_factory=Counter)

    def add(self, order: Order) -> None:
        self.sales += order.total_amount
        self.orders += 1
        self.profit += order.item_profit
        self.channel_counts[order.channel] += 1

    @property
    def top_channel(self) -> OrderChannel:
        # max() keeps the first maximum, so ties go to the earlier canonical channel
        return max(CHANNEL_ORDER, key=lambda channel: self.channel_counts[channel])


def _rollup(orders: Iterable[Order]) -> Dict[str, _LocationTotals]:
    totals: Dict[str, _LocationTotals] = {}
    for order in orders:
        entry = totals.get(order.location_id)
        if entry is None:
            entry = totals[order.location_id] = _LocationTotals(
                location_id=order.location_id, location_name=order.location_name
            )
        entry.add(order)
    return totals


def get_location_performance(
    orders: Iterable[Order],
    previous_orders: Optional[Iterable[Order]] = None,
) -> List[LocationPerformance]:
    """
    Per-location rollups sorted by sales, highest first.

    When previous_orders is given, growth is the location's sales change
    against the previous period; otherwise growth is 0.
    """
    current = _rollup(orders)
    previous = _rollup(previous_orders) if previous_orders is not None else {}

    ranked = sorted(current.values(), key=lambda entry: entry.sales, reverse=True)

    return [
        LocationPerformance(
            location_id=entry.location_id,
            location_name=entry.location_name,
            sales=round_money(entry.sales),
            orders=entry.orders,
            average_order_value=round_money(safe_divide(entry.sales, entry.orders)),
            top_channel=entry.top_channel,
            growth=growth_rate(
                entry.sales,
                previous[entry.location_id].sales if entry.location_id in previous else ZERO,
            ),
            profit=round_money(entry.profit),
            profit_margin=percentage_of(entry.profit, entry.sales),
        )
        for entry in ranked
    ]
