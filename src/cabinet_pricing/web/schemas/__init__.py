"""Pydantic schemas for the REST API."""

from cabinet_pricing.web.schemas.requests import (
    CatalogValidateRequest,
    CombinationSchema,
    OrderRequest,
    PaymentCheckRequest,
    PriceListRequest,
    PriceRequest,
    ScheduleRequest,
    WeightRequest,
    WidthRangeSchema,
)
from cabinet_pricing.web.schemas.responses import (
    ErrorResponseSchema,
    OrderResponse,
    PaymentCheckSchema,
    PaymentScheduleSchema,
    PriceBreakdownSchema,
    PriceListResponse,
    PriceResponse,
    ValidationResultSchema,
    WeightSchema,
)

__all__ = [
    # Requests
    "CatalogValidateRequest",
    "CombinationSchema",
    "OrderRequest",
    "PaymentCheckRequest",
    "PriceListRequest",
    "PriceRequest",
    "ScheduleRequest",
    "WeightRequest",
    "WidthRangeSchema",
    # Responses
    "ErrorResponseSchema",
    "OrderResponse",
    "PaymentCheckSchema",
    "PaymentScheduleSchema",
    "PriceBreakdownSchema",
    "PriceListResponse",
    "PriceResponse",
    "ValidationResultSchema",
    "WeightSchema",
]
