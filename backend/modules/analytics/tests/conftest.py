# backend/modules/analytics/tests/conftest.py

import pytest
import pytz
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.exceptions import register_exception_handlers
from modules.analytics.constants import OrderChannel
from modules.analytics.routers.analytics_router import (
    get_date_range_resolver,
    get_order_repository,
    get_sales_report_service,
    router,
)
from modules.analytics.services.date_range_service import DateRangeResolver
from modules.analytics.services.order_repository import InMemoryOrderRepository
from modules.analytics.services.sales_report_service import SalesReportService
from tests.factories import make_item, make_order

# Wednesday afternoon; last7Days covers 2024-01-11 .. 2024-01-17
FIXED_NOW = datetime(2024, 1, 17, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def resolver():
    """Resolver pinned to UTC and a fixed current time"""
    return DateRangeResolver(tz=pytz.utc, now=lambda: FIXED_NOW)


@pytest.fixture
def three_dine_in_orders():
    """Totals 10/20/30 with one item each costing 4/8/12"""
    return [
        make_order(
            total,
            datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
            items=[make_item(f"Dish {total}", "Main Courses", 1, total, cost)],
        )
        for total, cost in [(10, 4), (20, 8), (30, 12)]
    ]


@pytest.fixture
def mixed_orders():
    """Orders across two locations, several channels and days of the current week"""
    def burger(qty):
        return make_item("Burger", "Main Courses", qty, "12.50", "5.00", item_id="burger")

    def fries(qty):
        return make_item("Fries", "Sides", qty, "4.00", "1.00", item_id="fries")

    def soda(qty):
        return make_item("Soda", "Beverages", qty, "2.50", "0.50", item_id="soda")

    return [
        # Current period
        make_order("29.00", datetime(2024, 1, 15, 9, 15, tzinfo=timezone.utc),
                   items=[burger(2), fries(1)]),
        make_order("16.50", datetime(2024, 1, 15, 18, 40, tzinfo=timezone.utc),
                   channel=OrderChannel.TAKEOUT, items=[burger(1), fries(1)]),
        make_order("7.50", datetime(2024, 1, 16, 12, 5, tzinfo=timezone.utc),
                   channel=OrderChannel.DELIVERY, location_id="loc-2",
                   location_name="Uptown", items=[soda(3)]),
        make_order("41.50", datetime(2024, 1, 17, 11, 30, tzinfo=timezone.utc),
                   channel=OrderChannel.DELIVERY, location_id="loc-2",
                   location_name="Uptown", items=[burger(3), soda(1)]),
        # Previous period
        make_order("25.00", datetime(2024, 1, 8, 13, 0, tzinfo=timezone.utc),
                   items=[burger(2)]),
        # Outside both periods
        make_order("99.00", datetime(2023, 12, 1, 13, 0, tzinfo=timezone.utc),
                   items=[burger(8)]),
    ]


@pytest.fixture
def order_repository(mixed_orders):
    return InMemoryOrderRepository(mixed_orders)


@pytest.fixture
def report_service(order_repository, resolver):
    return SalesReportService(order_repository, resolver=resolver)


@pytest.fixture
def app(order_repository, resolver):
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)

    app.dependency_overrides[get_order_repository] = lambda: order_repository
    app.dependency_overrides[get_date_range_resolver] = lambda: resolver
    app.dependency_overrides[get_sales_report_service] = lambda: SalesReportService(
        order_repository, resolver=resolver
    )
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
