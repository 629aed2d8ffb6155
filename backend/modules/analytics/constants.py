# backend/modules/analytics/constants.py

"""
Constants for analytics module.

Centralizes channel enumeration, date range presets and display metadata.
"""

from enum import Enum


class OrderChannel(str, Enum):
    """Order placement/fulfillment mode, in canonical reporting order"""

    DINE_IN = "dine-in"
    TAKEOUT = "takeout"
    DELIVERY = "delivery"
    CATERING = "catering"


# Canonical order used for distribution output and top-channel tie-breaking
CHANNEL_ORDER = tuple(OrderChannel)
VALID_CHANNELS = [channel.value for channel in OrderChannel]


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    DIGITAL_WALLET = "digital_wallet"
    ONLINE = "online"


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
    COUPON = "coupon"


# Date range presets: key -> (label, number of days ending today)
TODAY = "today"
YESTERDAY = "yesterday"
THIS_WEEK = "thisWeek"
THIS_MONTH = "thisMonth"

ROLLING_PRESETS = {
    "last7Days": ("Last 7 Days", 7),
    "last30Days": ("Last 30 Days", 30),
    "last90Days": ("Last 90 Days", 90),
}

PRESET_LABELS = {
    TODAY: "Today",
    YESTERDAY: "Yesterday",
    THIS_WEEK: "This Week",
    THIS_MONTH: "This Month",
    **{key: label for key, (label, _) in ROLLING_PRESETS.items()},
}

# Short keys accepted by the reporting endpoint
PRESET_ALIASES = {
    "7d": "last7Days",
    "30d": "last30Days",
    "90d": "last90Days",
}

WEEK_LENGTH_DAYS = 7

# Day names are fixed so output does not depend on host locale
DAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
WEEKEND_DAYS = {5, 6}  # date.weekday(): Saturday, Sunday

# Location identifiers accepted in query parameters
LOCATION_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"

# Presentation metadata, consumed only by the channel metadata endpoint
CHANNEL_DISPLAY = {
    OrderChannel.DINE_IN: {"label": "Dine-in", "color": "#0088FE"},
    OrderChannel.TAKEOUT: {"label": "Takeout", "color": "#00C49F"},
    OrderChannel.DELIVERY: {"label": "Delivery", "color": "#FFBB28"},
    OrderChannel.CATERING: {"label": "Catering", "color": "#FF8042"},
}

# Error Messages
ERROR_MESSAGES = {
    "invalid_date_range": "Invalid date range. End date must not be before start date.",
    "unparsable_date": "Could not parse '{value}' as a date or timestamp.",
    "unknown_preset": "Unknown time range '{value}'. Expected one of: {choices}.",
    "invalid_channel": "Unknown channel '{value}'. Expected one of: {choices}.",
    "invalid_location": "Malformed location identifier '{value}'.",
}
