"""Pydantic request schemas for the REST API.

Cabinet, order, schedule and payment bodies reuse the configuration
schemas, so a JSON order file and an API order body are interchangeable.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cabinet_pricing.application.config.schemas import (
    CabinetRequestConfig,
    OrderRequestConfig,
    PaymentCheckConfig,
    ScheduleRequestConfig,
)


class PriceRequest(CabinetRequestConfig):
    """Request to price one cabinet configuration."""

    include_weight: bool = Field(default=True, description="Also estimate weight")
    include_service_fees: bool = Field(
        default=False,
        description="Apply colour service fees as if this were the whole order",
    )


class WeightRequest(CabinetRequestConfig):
    """Request to estimate weight and packaging of a cabinet line."""


OrderRequest = OrderRequestConfig
ScheduleRequest = ScheduleRequestConfig
PaymentCheckRequest = PaymentCheckConfig


class WidthRangeSchema(BaseModel):
    """A price-list width band in millimetres."""

    model_config = ConfigDict(extra="forbid")

    label: str | None = Field(default=None, description="Row label; MIN-MAXmm if omitted")
    min_width_mm: float = Field(..., gt=0)
    max_width_mm: float = Field(..., gt=0)

    @model_validator(mode="after")
    def check_order(self) -> "WidthRangeSchema":
        if self.min_width_mm > self.max_width_mm:
            raise ValueError("min_width_mm cannot exceed max_width_mm")
        return self


class CombinationSchema(BaseModel):
    """Door style, colour and finish for a price-list column."""

    model_config = ConfigDict(extra="forbid")

    door_style_id: str | None = None
    color_id: str | None = None
    finish_id: str | None = None


class PriceListRequest(BaseModel):
    """Request for a cabinet type's price list."""

    model_config = ConfigDict(extra="forbid")

    cabinet_type_id: str = Field(..., min_length=1)
    width_ranges: list[WidthRangeSchema] | None = None
    combinations: list[CombinationSchema] | None = None


class CatalogValidateRequest(BaseModel):
    """Request to validate a rate catalog without loading it."""

    catalog: dict[str, Any] = Field(..., description="Rate catalog as JSON")
