# backend/modules/analytics/services/order_filter_service.py

from typing import Iterable, List, Optional, Sequence

from ..constants import OrderChannel
from ..schemas.analytics_schemas import DateRange
from ..schemas.order_schemas import Order


def filter_orders(
    orders: Iterable[Order],
    date_range: DateRange,
    location_ids: Optional[Sequence[str]] = None,
    channels: Optional[Sequence[OrderChannel]] = None,
) -> List[Order]:
    """
    Narrow orders to a date range and optional location/channel sets.

    Both range bounds are inclusive. An empty or missing set means no
    restriction on that dimension. Input order is preserved.
    """
    location_set = set(location_ids or ())
    channel_set = {OrderChannel(channel) for channel in channels or ()}

    return [
        order
        for order in orders
        if date_range.contains(order.created_at)
        and (not location_set or order.location_id in location_set)
        and (not channel_set or order.channel in channel_set)
    ]
