"""FastAPI REST API for cabinet pricing.

This module provides a REST API for pricing cabinets and orders, building
and checking payment schedules, and validating rate catalogs. The catalog
served is read from the file named by ``CABINET_PRICING_CATALOG``.

Usage:
    CABINET_PRICING_CATALOG=catalog.json uvicorn cabinet_pricing.web:app --reload
"""

from cabinet_pricing.web.app import app, create_app

__all__ = ["app", "create_app"]
