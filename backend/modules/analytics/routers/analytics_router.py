# backend/modules/analytics/routers/analytics_router.py

from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from datetime import datetime, timezone
from functools import lru_cache
import logging

from core.config import settings
from core.memory_cache import LRUCache

from .. import __version__
from ..constants import CHANNEL_DISPLAY
from ..schemas.analytics_schemas import (
    ChannelDisplay,
    DateRangePreset,
    SalesReport,
    SalesReportQuery,
)
from ..services.date_range_service import DateRangeResolver
from ..services.order_repository import InMemoryOrderRepository, OrderRepository
from ..services.sales_report_service import SalesReportService
from .params import parse_channels, parse_location_ids

router = APIRouter(prefix="/analytics", tags=["Analytics & Reporting"])
logger = logging.getLogger(__name__)

# Shared across requests; None when report caching is disabled
report_cache: Optional[LRUCache] = (
    LRUCache(
        max_size=settings.analytics_report_cache_max_size,
        ttl_seconds=settings.analytics_report_cache_ttl_seconds,
    )
    if settings.analytics_report_cache_enabled
    else None
)


@lru_cache()
def get_order_repository() -> OrderRepository:
    """
    Default order source.

    Deployments override this dependency with a repository backed by their
    order store; tests override it with an in-memory fake.
    """
    if settings.analytics_orders_seed_file:
        return InMemoryOrderRepository.from_json_file(
            settings.analytics_orders_seed_file
        )
    logger.warning("No order source configured; reports will be empty")
    return InMemoryOrderRepository()


def get_date_range_resolver() -> DateRangeResolver:
    return DateRangeResolver()


def get_sales_report_service(
    repository: OrderRepository = Depends(get_order_repository),
    resolver: DateRangeResolver = Depends(get_date_range_resolver),
) -> SalesReportService:
    return SalesReportService(repository, resolver=resolver, cache=report_cache)


@router.get("/sales/report", response_model=SalesReport)
async def get_sales_report(
    limit: int = Query(
        settings.analytics_default_top_items,
        ge=1,
        le=settings.analytics_max_top_items,
        description="Maximum rows in ranking lists",
    ),
    time_range: str = Query(
        settings.analytics_default_time_range,
        alias="timeRange",
        description="Preset key, e.g. last7Days, thisMonth, 30d",
    ),
    week_start: Optional[str] = Query(
        None, alias="weekStart", description="Week anchor date; overrides timeRange"
    ),
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    location_ids: Optional[str] = Query(
        None, alias="locationIds", description="Comma-separated location ids"
    ),
    channels: Optional[str] = Query(
        None, description="Comma-separated channels: dine-in,takeout,delivery,catering"
    ),
    service: SalesReportService = Depends(get_sales_report_service),
):
    """
    Generate the sales analytics report.

    Returns headline metrics, growth against the preceding period of equal
    length, daily and hourly series, channel distribution, top items and
    per-location performance, together with the applied filters and the
    fetched versus filtered order counts.
    """
    query = SalesReportQuery(
        limit=limit,
        time_range=time_range,
        week_start=week_start,
        date_from=date_from,
        date_to=date_to,
        location_ids=parse_location_ids(location_ids),
        channels=parse_channels(channels),
    )
    return await service.generate_report(query)


@router.get("/sales/presets", response_model=List[DateRangePreset])
async def get_date_range_presets(
    resolver: DateRangeResolver = Depends(get_date_range_resolver),
):
    """Supported time range presets resolved against the current date."""
    return resolver.presets()


@router.get("/sales/channels", response_model=List[ChannelDisplay])
async def get_channel_display():
    """Display labels and colours for each order channel."""
    return [
        ChannelDisplay(channel=channel, **display)
        for channel, display in CHANNEL_DISPLAY.items()
    ]


@router.get("/health")
async def health_check():
    """
    Health check endpoint for the analytics service.
    """
    return {
        "status": "healthy",
        "service": "analytics",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "report_cache": (
            {"enabled": True, **report_cache.get_stats()}
            if report_cache is not None
            else {"enabled": False}
        ),
    }
