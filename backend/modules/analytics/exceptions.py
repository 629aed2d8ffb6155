# backend/modules/analytics/exceptions.py

"""
Custom exceptions for analytics module.

Only boundary validation raises; the aggregation functions are total over
validated orders.
"""

from typing import Optional, Dict, Any


class AnalyticsBaseException(Exception):
    """Base exception for all analytics errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidDateRange(AnalyticsBaseException):
    """Raised for an unparsable, unknown or inverted date range"""

    def __init__(
        self,
        message: str,
        start: Optional[Any] = None,
        end: Optional[Any] = None
    ):
        details = {
            "start": str(start) if start is not None else None,
            "end": str(end) if end is not None else None,
        }
        super().__init__(message, "INVALID_DATE_RANGE", details)


class InvalidFilterValue(AnalyticsBaseException):
    """Raised for an unrecognized channel or malformed location identifier"""

    def __init__(self, parameter: str, value: Any, constraint: str):
        message = f"Invalid value for '{parameter}': {constraint}"
        details = {
            "parameter": parameter,
            "value": value,
            "constraint": constraint
        }
        super().__init__(message, "INVALID_FILTER_VALUE", details)


# Error handler utility
def handle_analytics_exception(exc: AnalyticsBaseException) -> Dict[str, Any]:
    """Convert analytics exception to API response format"""
    return {
        "error": {
            "code": exc.error_code,
            "message": exc.message,
            "details": exc.details
        }
    }
