# backend/modules/analytics/__init__.py

"""
Analytics Module - Sales Reports

Turns a stream of completed restaurant orders into a sales analytics report
for a chosen date range, optionally narrowed to locations and channels.

Key Features:
- Headline sales metrics and growth against the previous period
- Daily and hourly sales series
- Channel distribution, top items and location performance
- Date range presets and custom ranges

Components:
- Services: Filtering, aggregation and report orchestration
- Schemas: Pydantic models for orders and report payloads
- Routers: FastAPI endpoints for the reporting API
- Tests: Unit and API tests
"""

__version__ = "1.0.0"
