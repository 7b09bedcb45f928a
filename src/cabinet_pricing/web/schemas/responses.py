"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PartCostSchema(BaseModel):
    """Area and cost of one part across a line item."""

    part_name: str
    role: str
    width_mm: float
    height_mm: float
    area_sqm: float = Field(..., description="Area of one piece")
    pieces: int
    total_area_sqm: float
    rate_per_sqm: float
    cost: float


class HardwareLineSchema(BaseModel):
    """Priced hardware for one requirement."""

    requirement_id: str | None
    category: str
    unit_scope: str | None
    required_quantity: float
    source: str = Field(..., description="How the hardware was resolved")
    name: str
    unit_cost: float
    base_cost: float
    final_cost: float = Field(..., description="Cost after markup and discount")


class ServiceFeeSchema(BaseModel):
    """Colour service fee outcome."""

    color_id: str
    color_name: str
    color_total: float
    service_fee: float
    tier: str
    minimum_required: float
    shortfall: float
    in_tier_gap: bool


class CarcassCostSchema(BaseModel):
    unit_cost: float
    total: float
    rate_per_sqm: float
    rate_source: str
    material_type: str | None


class DoorCostSchema(BaseModel):
    unit_cost: float
    total: float
    door_area_sqm: float
    style_rate: float
    color_surcharge: float
    finish_rate: float


class HardwareCostSchema(BaseModel):
    unit_cost: float
    total: float
    lines: list[HardwareLineSchema]


class LineItemSchema(BaseModel):
    """One priced cabinet line."""

    cabinet_type_id: str
    cabinet_type_name: str
    width_mm: float
    height_mm: float
    depth_mm: float
    quantity: int
    door_style_id: str | None
    color_id: str | None
    finish_id: str | None
    carcass: CarcassCostSchema
    doors: DoorCostSchema
    hardware: HardwareCostSchema
    parts: list[PartCostSchema]
    subtotal: float
    unit_price: float
    degraded: list[str]


class PriceBreakdownSchema(BaseModel):
    """Price breakdown; components unrounded, ``display`` rounded half-up."""

    carcass: float
    doors: float
    hardware: float
    service_fees: list[ServiceFeeSchema]
    service_fee_total: float
    subtotal: float
    gst: float
    gst_rate: float
    total: float = Field(..., description="Rounded half-up to whole currency units")
    display: dict[str, float]
    rate_version: str | None
    degraded: list[str] = Field(
        default_factory=list, description="Warnings for pricing that used fallbacks"
    )
    lines: list[LineItemSchema]


class PackageDimensionsSchema(BaseModel):
    length_mm: float
    width_mm: float
    height_mm: float


class WeightSchema(BaseModel):
    """Weight and packaging estimate of a line item."""

    carcass_weight_kg: float
    door_weight_kg: float
    hardware_weight_kg: float
    unit_weight_kg: float
    total_weight_kg: float
    quantity: int
    package_dimensions: PackageDimensionsSchema
    carcass_volume_cubic_m: float
    door_volume_cubic_m: float
    total_volume_cubic_m: float
    shipping_volume_cubic_m: float


class PaymentScheduleSchema(BaseModel):
    deposit_amount: float
    deposit_percentage: float
    balance_amount: float
    balance_percentage: float
    total_amount: float
    deposit_due_date: datetime
    balance_due_date: datetime


class PaymentCheckSchema(BaseModel):
    valid: bool
    payment_type: str
    expected: float
    actual: float
    message: str | None = None


class FulfilmentSchema(BaseModel):
    delivery: float
    assembly: float
    total: float
    assembly_requested: bool
    assembly_applied: bool
    estimated_dispatch_date: datetime


class PriceResponse(BaseModel):
    """Response for pricing a single cabinet."""

    breakdown: PriceBreakdownSchema
    weight: WeightSchema | None = None
    warnings: list[str] = Field(default_factory=list)


class OrderResponse(BaseModel):
    """Response for pricing a whole order."""

    breakdown: PriceBreakdownSchema
    weights: list[WeightSchema]
    total_weight_kg: float
    shipping_volume_cubic_m: float
    fulfilment: FulfilmentSchema | None = None
    grand_total: float = Field(..., description="Cabinet total plus fulfilment")
    schedule: PaymentScheduleSchema | None = None
    warnings: list[str] = Field(default_factory=list)


class PriceListRowSchema(BaseModel):
    label: str
    min_width_mm: float
    max_width_mm: float
    prices: list[float]


class PriceListResponse(BaseModel):
    cabinet_type_id: str
    cabinet_type_name: str
    columns: list[str]
    rows: list[PriceListRowSchema]


class ValidationResultSchema(BaseModel):
    """Response for catalog validation."""

    is_valid: bool = Field(..., description="Whether the catalog is usable")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional details")
