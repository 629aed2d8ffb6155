# backend/modules/analytics/services/growth_service.py

from typing import Iterable

from ..schemas.analytics_schemas import GrowthMetrics
from ..schemas.order_schemas import Order
from ..utils.money import growth_rate
from .sales_metrics_service import SalesTotals


def calculate_growth_metrics(
    current_orders: Iterable[Order],
    previous_orders: Iterable[Order],
    period_label: str,
) -> GrowthMetrics:
    """
    Percentage change of sales, order count and average order value.

    Growth is computed from unrounded totals. A metric whose previous value
    is zero reports 0 growth.
    """
    current = SalesTotals.from_orders(current_orders)
    previous = SalesTotals.from_orders(previous_orders)

    return GrowthMetrics(
        sales_growth=growth_rate(current.total_sales, previous.total_sales),
        order_growth=growth_rate(current.total_orders, previous.total_orders),
        aov_growth=growth_rate(
            current.average_order_value, previous.average_order_value
        ),
        period_label=period_label,
    )
