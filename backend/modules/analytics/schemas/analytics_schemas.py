# backend/modules/analytics/schemas/analytics_schemas.py

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ..constants import OrderChannel

# Decimal in Python, plain number in JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Percentage = Money


class AnalyticsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DateRange(AnalyticsModel):
    """Closed-inclusive reporting window"""

    start_date: datetime
    end_date: datetime
    label: str

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc_when_naive(cls, v):
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end_date - self.start_date

    def contains(self, moment: datetime) -> bool:
        return self.start_date <= moment <= self.end_date


class SalesMetrics(AnalyticsModel):
    """Scalar aggregates over an order collection"""

    total_sales: Money = Field(description="Sum of order totals")
    total_orders: int
    average_order_value: Money
    total_items: int = Field(description="Sum of item quantities")
    total_tax: Money
    total_discounts: Money
    total_tips: Money
    total_delivery_fees: Money
    gross_profit: Money = Field(description="Sales minus sale-time cost of goods")
    profit_margin: Percentage


class GrowthMetrics(AnalyticsModel):
    """Relative change of the current period versus the previous one"""

    sales_growth: Percentage
    order_growth: Percentage
    aov_growth: Percentage
    period_label: str


class DailySalesData(AnalyticsModel):
    date: date
    sales: Money
    orders: int
    average_order_value: Money
    profit: Money
    profit_margin: Percentage
    day_of_week: str
    is_weekend: bool


class HourlySalesData(AnalyticsModel):
    hour: int = Field(ge=0, le=23)
    hour_label: str
    sales: Money
    orders: int
    average_order_value: Money
    profit: Money
    profit_margin: Percentage


class ChannelDistribution(AnalyticsModel):
    channel: OrderChannel
    sales: Money
    orders: int
    percentage: Percentage = Field(description="Share of total sales")
    average_order_value: Money


class TopPerformingItem(AnalyticsModel):
    menu_item_id: str
    name: str
    category: str
    total_sales: Money
    total_quantity: int
    order_count: int = Field(description="Number of order lines containing the item")
    average_price: Money
    profit_margin: Percentage
    total_profit: Money
    rank: int = Field(ge=1)


class LocationPerformance(AnalyticsModel):
    location_id: str
    location_name: str
    sales: Money
    orders: int
    average_order_value: Money
    top_channel: OrderChannel
    growth: Percentage = Field(
        Decimal("0"), description="Sales growth versus the previous period"
    )
    profit: Money
    profit_margin: Percentage


class SalesReportQuery(AnalyticsModel):
    """Validated reporting request"""

    limit: int = Field(10, ge=1)
    time_range: str = "last7Days"
    week_start: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    location_ids: List[str] = Field(default_factory=list)
    channels: List[OrderChannel] = Field(default_factory=list)


class ReportFilters(AnalyticsModel):
    """Echo of the filters applied to a report"""

    date_range: DateRange
    previous_date_range: DateRange
    location_ids: List[str]
    channels: List[OrderChannel]
    limit: int


class SalesReport(AnalyticsModel):
    filters: ReportFilters
    total_orders_fetched: int = Field(description="Orders returned by the repository")
    filtered_orders: int = Field(description="Orders left after filtering")
    metrics: SalesMetrics
    growth: GrowthMetrics
    daily_sales: List[DailySalesData]
    hourly_sales: List[HourlySalesData]
    channel_distribution: List[ChannelDistribution]
    top_items: List[TopPerformingItem]
    location_performance: List[LocationPerformance]
    generated_at: datetime


class DateRangePreset(AnalyticsModel):
    key: str
    label: str
    start_date: datetime
    end_date: datetime


class ChannelDisplay(AnalyticsModel):
    channel: OrderChannel
    label: str
    color: str
