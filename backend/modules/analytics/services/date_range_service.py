# backend/modules/analytics/services/date_range_service.py

"""
Date range resolution for sales reports.

Turns preset keys, week anchors and custom bounds into closed-inclusive
DateRange values in the configured report timezone, and derives the
immediately preceding period of equal length for growth comparisons.
All arithmetic returns new values; nothing is mutated in place.
"""

import logging
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Callable, List, Optional, Union

import pytz
from dateutil import parser as date_parser

from core.config import settings

from ..constants import (
    ERROR_MESSAGES,
    PRESET_ALIASES,
    PRESET_LABELS,
    ROLLING_PRESETS,
    THIS_MONTH,
    THIS_WEEK,
    TODAY,
    WEEK_LENGTH_DAYS,
    YESTERDAY,
)
from ..exceptions import InvalidDateRange
from ..schemas.analytics_schemas import DateRange, DateRangePreset

logger = logging.getLogger(__name__)

# Smallest representable step between two datetimes
ONE_TICK = timedelta(microseconds=1)

DateBound = Union[str, date, datetime]

# Two parse defaults that differ in every field; a component the input omits
# shows up as a difference between the two results
_DEFAULT_A = datetime(2000, 1, 1, 0, 0, 0, 0)
_DEFAULT_B = datetime(2001, 2, 2, 1, 1, 1, 1)


def as_pytz_timezone(tz: Union[str, tzinfo]):
    """Coerce a zone name or any tzinfo into a pytz zone"""
    if hasattr(tz, "localize"):
        return tz
    try:
        return pytz.timezone(str(tz))
    except pytz.UnknownTimeZoneError:
        offset = None if isinstance(tz, str) else tz.utcoffset(None)
        if offset is None:
            raise ValueError(f"Unsupported report timezone: {tz!r}")
        return pytz.FixedOffset(int(offset.total_seconds() // 60))


class DateRangeResolver:
    """Resolves reporting windows in a single, fixed timezone"""

    def __init__(self, tz=None, now: Optional[Callable[[], datetime]] = None):
        self.tz = as_pytz_timezone(tz) if tz is not None else settings.report_tz
        self._now = now

    def now(self) -> datetime:
        current = self._now() if self._now else datetime.now(self.tz)
        return self._to_report_tz(current)

    def today(self) -> date:
        return self.now().date()

    # Preset ranges

    def resolve(self, key: str) -> DateRange:
        """Resolve a preset key such as 'last7Days' or '30d'"""
        preset = PRESET_ALIASES.get(key, key)
        today = self.today()

        if preset == TODAY:
            first_day, last_day = today, today
        elif preset == YESTERDAY:
            first_day = last_day = today - timedelta(days=1)
        elif preset == THIS_WEEK:
            # Weeks start on Sunday
            first_day, last_day = today - timedelta(days=(today.weekday() + 1) % 7), today
        elif preset == THIS_MONTH:
            first_day, last_day = today.replace(day=1), today
        elif preset in ROLLING_PRESETS:
            _, days = ROLLING_PRESETS[preset]
            first_day, last_day = today - timedelta(days=days - 1), today
        else:
            raise InvalidDateRange(
                ERROR_MESSAGES["unknown_preset"].format(
                    value=key, choices=", ".join(self.preset_keys())
                )
            )

        return self._day_range(first_day, last_day, PRESET_LABELS[preset])

    def presets(self) -> List[DateRangePreset]:
        """All presets resolved against the current moment"""
        presets = []
        for key in PRESET_LABELS:
            resolved = self.resolve(key)
            presets.append(
                DateRangePreset(
                    key=key,
                    label=resolved.label,
                    start_date=resolved.start_date,
                    end_date=resolved.end_date,
                )
            )
        return presets

    @staticmethod
    def preset_keys() -> List[str]:
        return list(PRESET_LABELS) + list(PRESET_ALIASES)

    # Explicit ranges

    def week_range(self, week_start: DateBound) -> DateRange:
        """Seven whole days starting at week_start"""
        first_day = self._parse_bound(week_start, end_of_day=False).date()
        last_day = first_day + timedelta(days=WEEK_LENGTH_DAYS - 1)
        return self._day_range(
            first_day, last_day, f"Week of {first_day.isoformat()}"
        )

    def custom_range(
        self, date_from: DateBound, date_to: DateBound, label: str = "Custom Range"
    ) -> DateRange:
        """
        Range between two explicit bounds.

        Whole dates cover the full day at either end. Raises InvalidDateRange
        for unparsable bounds or when the end precedes the start.
        """
        start = self._parse_bound(date_from, end_of_day=False)
        end = self._parse_bound(date_to, end_of_day=True)
        if end < start:
            logger.warning(f"Rejected inverted date range {start} -> {end}")
            raise InvalidDateRange(
                ERROR_MESSAGES["invalid_date_range"], start=start, end=end
            )
        return DateRange(start_date=start, end_date=end, label=label)

    def previous_period(self, current: DateRange) -> DateRange:
        """Immediately preceding range with the same duration"""
        previous_end = self.tz.normalize(current.start_date - ONE_TICK)
        previous_start = self.tz.normalize(previous_end - current.duration)
        return DateRange(
            start_date=previous_start,
            end_date=previous_end,
            label=f"Previous period ({current.label})",
        )

    # Helpers

    def _day_range(self, first_day: date, last_day: date, label: str) -> DateRange:
        return DateRange(
            start_date=self._start_of_day(first_day),
            end_date=self._end_of_day(last_day),
            label=label,
        )

    def _start_of_day(self, day: date) -> datetime:
        return self.tz.localize(datetime.combine(day, time.min))

    def _end_of_day(self, day: date) -> datetime:
        return self.tz.localize(datetime.combine(day, time.max))

    def _to_report_tz(self, moment: datetime) -> datetime:
        if moment.tzinfo is None:
            return self.tz.localize(moment)
        return moment.astimezone(self.tz)

    def _parse_bound(self, value: DateBound, end_of_day: bool) -> datetime:
        if isinstance(value, datetime):
            return self._to_report_tz(value)
        if isinstance(value, date):
            return self._end_of_day(value) if end_of_day else self._start_of_day(value)
        if not isinstance(value, str) or not value.strip():
            raise InvalidDateRange(
                ERROR_MESSAGES["unparsable_date"].format(value=value)
            )

        text = value.strip()
        try:
            first = date_parser.parse(text, default=_DEFAULT_A)
            second = date_parser.parse(text, default=_DEFAULT_B)
        except (ValueError, OverflowError):
            raise InvalidDateRange(
                ERROR_MESSAGES["unparsable_date"].format(value=value)
            )

        # Year, month and day must all come from the input, never the clock
        if first.date() != second.date():
            raise InvalidDateRange(
                ERROR_MESSAGES["unparsable_date"].format(value=value)
            )

        # No hour given: a whole calendar day
        if first.hour != second.hour:
            day = first.date()
            return self._end_of_day(day) if end_of_day else self._start_of_day(day)
        return self._to_report_tz(first)


def get_previous_period(current: DateRange, tz=None) -> DateRange:
    """Convenience wrapper around DateRangeResolver.previous_period"""
    return DateRangeResolver(tz=tz).previous_period(current)
