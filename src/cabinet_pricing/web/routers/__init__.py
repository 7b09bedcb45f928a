"""API routers for the REST API."""

from cabinet_pricing.web.routers.catalog import router as catalog_router
from cabinet_pricing.web.routers.pricing import router as pricing_router
from cabinet_pricing.web.routers.schedule import router as schedule_router

__all__ = [
    "catalog_router",
    "pricing_router",
    "schedule_router",
]
