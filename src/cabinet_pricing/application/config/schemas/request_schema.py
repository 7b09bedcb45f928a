"""Request schemas for pricing operations.

Range checks on dimensions and quantity are left to the domain validation
so that the CLI and the HTTP API report them identically; these models
only enforce shape and types.
"""

from pydantic import BaseModel, ConfigDict, Field

from cabinet_pricing.application.config.schemas.base import PaymentTypeConfig


class CabinetRequestConfig(BaseModel):
    """One cabinet configuration to price.

    Attributes:
        cabinet_type_id: Catalog id of the cabinet type.
        width_mm: Width; the type's default when omitted.
        height_mm: Height; the type's default when omitted.
        depth_mm: Depth; the type's default when omitted.
        quantity: Cabinets ordered.
        hardware: Brand set id or brand id per hardware category.
    """

    model_config = ConfigDict(extra="forbid")

    cabinet_type_id: str = Field(..., min_length=1)
    width_mm: float | None = Field(default=None, allow_inf_nan=False)
    height_mm: float | None = Field(default=None, allow_inf_nan=False)
    depth_mm: float | None = Field(default=None, allow_inf_nan=False)
    quantity: int = 1
    door_style_id: str | None = None
    color_id: str | None = None
    finish_id: str | None = None
    material_type: str | None = None
    hardware: dict[str, str] = Field(default_factory=dict)


class ZoneQuoteConfig(BaseModel):
    """Resolved delivery zone terms."""

    model_config = ConfigDict(extra="forbid")

    delivery_price: float = Field(default=0.0, ge=0)
    assembly_price_per_cabinet: float = Field(default=0.0, ge=0)
    assembly_carcass_surcharge_pct: float = Field(default=0.0, ge=0)
    assembly_doors_surcharge_pct: float = Field(default=0.0, ge=0)
    lead_time_days: int = Field(default=0, ge=0)
    assembly_available: bool = False


class ScheduleRequestConfig(BaseModel):
    """Payment schedule parameters."""

    model_config = ConfigDict(extra="forbid")

    total_amount: float = Field(..., ge=0, allow_inf_nan=False)
    deposit_percentage: float = Field(default=20.0, allow_inf_nan=False)
    deposit_due_days: int = Field(default=7, ge=0)
    balance_due_days: int = Field(default=30, ge=0)


class OrderRequestConfig(BaseModel):
    """A whole order: cabinet lines plus optional fulfilment and schedule terms."""

    model_config = ConfigDict(extra="forbid")

    items: list[CabinetRequestConfig] = Field(..., min_length=1, max_length=200)
    zone: ZoneQuoteConfig | None = None
    assembly: bool = False
    deposit_percentage: float = Field(default=20.0, allow_inf_nan=False)


class PaymentCheckConfig(BaseModel):
    """An attempted payment to check against a schedule."""

    model_config = ConfigDict(extra="forbid")

    schedule: ScheduleRequestConfig
    amount: float = Field(..., allow_inf_nan=False)
    payment_type: PaymentTypeConfig = PaymentTypeConfig.DEPOSIT
