# backend/tests/factories/__init__.py

"""
Shared test factories for the analytics backend.

These factories build validated order models for reporting tests.
"""

from .order import (
    MenuItemSnapshotFactory,
    OrderItemFactory,
    OrderFactory,
    make_item,
    make_order,
)

__all__ = [
    # Order
    'MenuItemSnapshotFactory',
    'OrderItemFactory',
    'OrderFactory',

    # Helpers
    'make_item',
    'make_order',
]
