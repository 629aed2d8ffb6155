# backend/modules/analytics/routers/params.py

"""
Parsing of reporting query parameters.

Comma-separated lists are split, trimmed and validated here so the engine
only ever sees known channels and well-formed location identifiers.
"""

import re
from typing import List, Optional

from ..constants import ERROR_MESSAGES, LOCATION_ID_PATTERN, VALID_CHANNELS, OrderChannel
from ..exceptions import InvalidFilterValue

_LOCATION_ID_RE = re.compile(LOCATION_ID_PATTERN)


def split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def parse_channels(raw: Optional[str]) -> List[OrderChannel]:
    """Parse 'dine-in,delivery' into channels; duplicates are dropped"""
    channels: List[OrderChannel] = []
    for token in split_csv(raw):
        if token not in VALID_CHANNELS:
            raise InvalidFilterValue(
                "channels",
                token,
                ERROR_MESSAGES["invalid_channel"].format(
                    value=token, choices=", ".join(VALID_CHANNELS)
                ),
            )
        channel = OrderChannel(token)
        if channel not in channels:
            channels.append(channel)
    return channels


def parse_location_ids(raw: Optional[str]) -> List[str]:
    location_ids: List[str] = []
    for token in split_csv(raw):
        if not _LOCATION_ID_RE.match(token):
            raise InvalidFilterValue(
                "locationIds",
                token,
                ERROR_MESSAGES["invalid_location"].format(value=token),
            )
        if token not in location_ids:
            location_ids.append(token)
    return location_ids
