# backend/modules/analytics/services/sales_report_service.py

import asyncio
import logging
from concurrent.futures import Executor
from datetime import datetime, timezone
from functools import partial
from typing import Any, Dict, Optional

from core.memory_cache import LRUCache

from ..exceptions import InvalidDateRange
from ..schemas.analytics_schemas import (
    DateRange,
    ReportFilters,
    SalesReport,
    SalesReportQuery,
)
from .channel_distribution_service import get_channel_distribution
from .date_range_service import DateRangeResolver
from .growth_service import calculate_growth_metrics
from .item_ranking_service import get_top_items
from .location_performance_service import get_location_performance
from .order_filter_service import filter_orders
from .order_repository import OrderRepository
from .sales_metrics_service import calculate_sales_metrics
from .time_series_service import get_daily_sales, get_hourly_sales

logger = logging.getLogger(__name__)


class SalesReportService:
    """Builds the sales report consumed by the reporting endpoint"""

    def __init__(
        self,
        repository: OrderRepository,
        resolver: Optional[DateRangeResolver] = None,
        cache: Optional[LRUCache] = None,
        executor: Optional[Executor] = None,
    ):
        self.repository = repository
        self.resolver = resolver or DateRangeResolver()
        self.cache = cache
        # None selects the event loop's default thread pool
        self.executor = executor

    def resolve_date_range(self, query: SalesReportQuery) -> DateRange:
        """Explicit bounds win over weekStart, which wins over the preset"""
        if query.date_from or query.date_to:
            if not (query.date_from and query.date_to):
                raise InvalidDateRange(
                    "Both dateFrom and dateTo are required for a custom range",
                    start=query.date_from,
                    end=query.date_to,
                )
            return self.resolver.custom_range(query.date_from, query.date_to)
        if query.week_start:
            return self.resolver.week_range(query.week_start)
        return self.resolver.resolve(query.time_range)

    async def generate_report(self, query: SalesReportQuery) -> SalesReport:
        """
        Resolve the reporting window, fetch and filter orders, and merge the
        output of every calculator into one report.

        Raises InvalidDateRange before any order is fetched when the window
        cannot be resolved.
        """
        date_range = self.resolve_date_range(query)
        previous_range = self.resolver.previous_period(date_range)

        if self.cache is None:
            return await self._build_report(query, date_range, previous_range)

        key = self._cache_key(query, date_range)
        return await self.cache.get_or_compute(
            key, lambda: self._build_report(query, date_range, previous_range)
        )

    def cache_stats(self) -> Dict[str, Any]:
        if self.cache is None:
            return {"enabled": False}
        return {"enabled": True, **self.cache.get_stats()}

    async def _build_report(
        self,
        query: SalesReportQuery,
        date_range: DateRange,
        previous_range: DateRange,
    ) -> SalesReport:
        loop = asyncio.get_running_loop()
        location_ids = query.location_ids or None

        # One fetch covers both the previous and the current period
        fetch_range = DateRange(
            start_date=previous_range.start_date,
            end_date=date_range.end_date,
            label=f"{previous_range.label} + {date_range.label}",
        )
        fetched = await loop.run_in_executor(
            self.executor, self.repository.fetch_orders, fetch_range, location_ids
        )

        in_range = filter_orders(fetched, date_range)
        current = filter_orders(in_range, date_range, query.location_ids, query.channels)
        previous = filter_orders(
            fetched, previous_range, query.location_ids, query.channels
        )

        logger.info(
            f"Generating sales report for {date_range.label}: "
            f"{len(in_range)} orders fetched, {len(current)} after filters, "
            f"{len(previous)} in previous period"
        )

        tz = self.resolver.tz
        calculations = [
            partial(calculate_sales_metrics, current),
            partial(calculate_growth_metrics, current, previous, previous_range.label),
            partial(get_daily_sales, current, tz),
            partial(get_hourly_sales, current, tz),
            partial(get_channel_distribution, current),
            partial(get_top_items, current, query.limit),
            partial(get_location_performance, current, previous),
        ]
        (
            metrics,
            growth,
            daily_sales,
            hourly_sales,
            channel_distribution,
            top_items,
            location_performance,
        ) = await asyncio.gather(
            *(loop.run_in_executor(self.executor, calc) for calc in calculations)
        )

        return SalesReport(
            filters=ReportFilters(
                date_range=date_range,
                previous_date_range=previous_range,
                location_ids=list(query.location_ids),
                channels=list(query.channels),
                limit=query.limit,
            ),
            total_orders_fetched=len(in_range),
            filtered_orders=len(current),
            metrics=metrics,
            growth=growth,
            daily_sales=daily_sales,
            hourly_sales=hourly_sales,
            channel_distribution=channel_distribution,
            top_items=top_items,
            location_performance=location_performance,
            generated_at=datetime.now(timezone.utc),
        )

    @staticmethod
    def _cache_key(query: SalesReportQuery, date_range: DateRange) -> str:
        return ":".join(
            [
                "sales_report",
                date_range.start_date.isoformat(),
                date_range.end_date.isoformat(),
                ",".join(sorted(query.location_ids)),
                ",".join(sorted(channel.value for channel in query.channels)),
                str(query.limit),
            ]
        )
