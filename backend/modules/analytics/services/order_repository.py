# backend/modules/analytics/services/order_repository.py

"""
Order source port for the analytics engine.

Reports never touch storage directly; they ask an OrderRepository for the
orders in a date range. Raw provider payloads are validated into Order
models here, at the boundary.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from ..schemas.analytics_schemas import DateRange
from ..schemas.order_schemas import Order
from .order_filter_service import filter_orders

logger = logging.getLogger(__name__)


class OrderRepository(ABC):
    """Source of normalized orders"""

    @abstractmethod
    def fetch_orders(
        self, date_range: DateRange, location_ids: Optional[Sequence[str]] = None
    ) -> List[Order]:
        """Orders created within date_range, optionally limited to locations"""


class InMemoryOrderRepository(OrderRepository):
    """Repository over an already materialized list of orders"""

    def __init__(self, orders: Iterable[Order] = ()):
        self._orders = tuple(orders)

    @classmethod
    def from_payloads(
        cls, payloads: Iterable[Mapping[str, Any]]
    ) -> "InMemoryOrderRepository":
        """Validate raw order payloads; raises pydantic.ValidationError on bad data"""
        return cls(Order.model_validate(payload) for payload in payloads)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryOrderRepository":
        with open(path, "r", encoding="utf-8") as f:
            payloads = json.load(f)
        repository = cls.from_payloads(payloads)
        logger.info(f"Loaded {len(repository)} orders from {path}")
        return repository

    def __len__(self) -> int:
        return len(self._orders)

    def fetch_orders(
        self, date_range: DateRange, location_ids: Optional[Sequence[str]] = None
    ) -> List[Order]:
        return filter_orders(self._orders, date_range, location_ids)
