# backend/modules/analytics/tests/test_query_params.py

import pytest

from modules.analytics.constants import OrderChannel
from modules.analytics.exceptions import InvalidFilterValue
from modules.analytics.routers.params import parse_channels, parse_location_ids, split_csv


class TestQueryParams:
    """Comma-separated query parameter parsing"""

    def test_split_csv(self):
        assert split_csv(None) == []
        assert split_csv("") == []
        assert split_csv(" a, b ,,c ") == ["a", "b", "c"]

    def test_parse_channels(self):
        """Known channels are parsed and deduplicated"""
        assert parse_channels("delivery,dine-in,delivery") == [
            OrderChannel.DELIVERY,
            OrderChannel.DINE_IN,
        ]

    def test_unknown_channel_names_parameter(self):
        """Unknown channels raise with the parameter name"""
        with pytest.raises(InvalidFilterValue) as exc_info:
            parse_channels("dine-in,drive-thru")

        assert exc_info.value.error_code == "INVALID_FILTER_VALUE"
        assert exc_info.value.details["parameter"] == "channels"
        assert exc_info.value.details["value"] == "drive-thru"

    def test_parse_location_ids(self):
        assert parse_location_ids("loc-1, loc_2,loc-1") == ["loc-1", "loc_2"]

    @pytest.mark.parametrize("raw", ["loc 1", "loc;DROP", "x" * 65])
    def test_malformed_location_id(self, raw):
        with pytest.raises(InvalidFilterValue) as exc_info:
            parse_location_ids(raw)

        assert exc_info.value.details["parameter"] == "locationIds"
