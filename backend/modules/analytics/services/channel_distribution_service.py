# backend/modules/analytics/services/channel_distribution_service.py

from collections import Counter
from decimal import Decimal
from typing import Dict, Iterable, List

from ..constants import CHANNEL_ORDER, OrderChannel
from ..schemas.analytics_schemas import ChannelDistribution
from ..schemas.order_schemas import Order
from ..utils.money import ZERO, percentage_of, round_money, safe_divide


def get_channel_distribution(orders: Iterable[Order]) -> List[ChannelDistribution]:
    """
    Per-channel sales, order counts and share of total sales.

    Channels are listed in canonical order and only when they have orders.
    Each percentage is rounded on its own; shares are not renormalized to
    sum to exactly 100.
    """
    sales: Dict[OrderChannel, Decimal] = {channel: ZERO for channel in CHANNEL_ORDER}
    counts: Counter = Counter()
    total_sales = ZERO

    for order in orders:
        sales[order.channel] += order.total_amount
        counts[order.channel] += 1
        total_sales += order.total_amount

    return [
        ChannelDistribution(
            channel=channel,
            sales=round_money(sales[channel]),
            orders=counts[channel],
            percentage=percentage_of(sales[channel], total_sales),
            average_order_value=round_money(
                safe_divide(sales[channel], counts[channel])
            ),
        )
        for channel in CHANNEL_ORDER
        if counts[channel] > 0
    ]
