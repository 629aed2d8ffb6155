# backend/modules/analytics/services/time_series_service.py

"""
Calendar-aware bucketing of orders into daily and hourly series.

Bucket keys come from order timestamps converted to the configured report
timezone, so the same orders produce the same series on any host.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List

from core.config import settings

from ..constants import DAY_ABBREVIATIONS, WEEKEND_DAYS
from ..schemas.analytics_schemas import DailySalesData, HourlySalesData
from ..schemas.order_schemas import Order
from ..utils.money import ZERO, percentage_of, round_money, safe_divide


@dataclass
class _Bucket:
    sales: Decimal = ZERO
    orders: int = 0
    profit: Decimal = ZERO

    def add(self, order: Order) -> None:
        self.sales += order.total_amount
        self.orders += 1
        self.profit += order.item_profit

    @property
    def average_order_value(self) -> Decimal:
        return round_money(safe_divide(self.sales, self.orders))

    @property
    def profit_margin(self) -> Decimal:
        return percentage_of(self.profit, self.sales)


def _local_time(order: Order, tz) -> datetime:
    return order.created_at.astimezone(tz)


def format_hour(hour: int) -> str:
    """12-hour clock label, e.g. '12 AM', '9 AM', '6 PM'"""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def get_daily_sales(orders: Iterable[Order], tz=None) -> List[DailySalesData]:
    """
    One entry per calendar date that has at least one order, ascending.

    Dates without orders are not synthesized.
    """
    tz = tz or settings.report_tz
    buckets: Dict[date, _Bucket] = defaultdict(_Bucket)
    for order in orders:
        buckets[_local_time(order, tz).date()].add(order)

    return [
        DailySalesData(
            date=day,
            sales=round_money(bucket.sales),
            orders=bucket.orders,
            average_order_value=bucket.average_order_value,
            profit=round_money(bucket.profit),
            profit_margin=bucket.profit_margin,
            day_of_week=DAY_ABBREVIATIONS[day.weekday()],
            is_weekend=day.weekday() in WEEKEND_DAYS,
        )
        for day, bucket in sorted(buckets.items())
    ]


def get_hourly_sales(orders: Iterable[Order], tz=None) -> List[HourlySalesData]:
    """
    Hour-of-day histogram across all dates in the input.

    Only hours with at least one order appear, ascending by hour.
    """
    tz = tz or settings.report_tz
    buckets: Dict[int, _Bucket] = defaultdict(_Bucket)
    for order in orders:
        buckets[_local_time(order, tz).hour].add(order)

    return [
        HourlySalesData(
            hour=hour,
            hour_label=format_hour(hour),
            sales=round_money(bucket.sales),
            orders=bucket.orders,
            average_order_value=bucket.average_order_value,
            profit=round_money(bucket.profit),
            profit_margin=bucket.profit_margin,
        )
        for hour, bucket in sorted(buckets.items())
    ]
