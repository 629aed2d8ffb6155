# backend/modules/analytics/tests/test_order_repository.py

import json
import pytest
from datetime import datetime, timezone
from decimal import Decimal
from pydantic import ValidationError

from modules.analytics.constants import OrderChannel
from modules.analytics.services.order_repository import InMemoryOrderRepository


def order_payload(**overrides):
    payload = {
        "id": "ord-1",
        "orderNumber": "ORD-00001",
        "locationId": "loc-1",
        "locationName": "Downtown",
        "channel": "delivery",
        "status": "completed",
        "items": [
            {
                "menuItemId": "pizza",
                "menuItem": {
                    "name": "Margherita",
                    "category": "Pizza",
                    "cost": "4.25",
                },
                "quantity": 2,
                "unitPrice": "12.00",
                "subtotal": "24.00",
            }
        ],
        "subtotal": "24.00",
        "taxAmount": "1.92",
        "deliveryFee": "3.50",
        "totalAmount": "29.42",
        "paymentMethod": "online",
        "createdAt": "2024-01-15T19:30:00",
    }
    payload.update(overrides)
    return payload


class TestInMemoryOrderRepository:
    """Order source used for seeding and tests"""

    def test_from_payloads_validates(self):
        """camelCase payloads become strict order models"""
        repository = InMemoryOrderRepository.from_payloads([order_payload()])

        assert len(repository) == 1

    def test_naive_timestamps_are_utc(self, resolver):
        repository = InMemoryOrderRepository.from_payloads([order_payload()])

        (order,) = repository.fetch_orders(resolver.custom_range("2024-01-15", "2024-01-15"))

        assert order.created_at == datetime(2024, 1, 15, 19, 30, tzinfo=timezone.utc)
        assert order.channel == OrderChannel.DELIVERY
        assert order.items[0].line_cost == Decimal("8.50")

    def test_invalid_payload_rejected(self):
        """Unknown channels never reach the engine"""
        with pytest.raises(ValidationError):
            InMemoryOrderRepository.from_payloads([order_payload(channel="drive-thru")])

    def test_fetch_filters_by_range_and_location(self, resolver):
        repository = InMemoryOrderRepository.from_payloads([
            order_payload(),
            order_payload(id="ord-2", locationId="loc-2"),
            order_payload(id="ord-3", createdAt="2024-02-01T10:00:00"),
        ])
        date_range = resolver.custom_range("2024-01-01", "2024-01-31")

        assert len(repository.fetch_orders(date_range)) == 2
        assert [order.id for order in repository.fetch_orders(date_range, ["loc-2"])] == ["ord-2"]

    def test_from_json_file(self, tmp_path):
        seed_file = tmp_path / "orders.json"
        seed_file.write_text(json.dumps([order_payload(), order_payload(id="ord-2")]))

        repository = InMemoryOrderRepository.from_json_file(seed_file)

        assert len(repository) == 2
