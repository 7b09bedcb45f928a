"""Rate catalog schemas.

These models describe the JSON rate catalog: global settings, carcass
materials, door styles, colours, finishes, cabinet types with their parts
and hardware requirements, and the hardware product/option/set tables.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cabinet_pricing.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    CabinetCategoryConfig,
    SettingRowConfig,
    UnitScopeConfig,
)


class MaterialConfig(BaseModel):
    """Carcass material specification."""

    model_config = ConfigDict(extra="forbid")

    material_type: str = Field(..., min_length=1)
    cost_per_sqm: float = Field(..., ge=0)
    density_kg_per_cubic_m: float = Field(default=0.0, ge=0)
    standard_thickness_mm: float = Field(default=18.0, gt=0, le=100)
    weight_factor: float = Field(default=1.0, ge=0)
    active: bool = True


class DoorStyleConfig(BaseModel):
    """Door style with its base rate and weight characteristics."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    base_rate_per_sqm: float = Field(default=0.0, ge=0)
    material_density_kg_per_sqm: float | None = Field(default=None, ge=0)
    thickness_mm: float | None = Field(default=None, gt=0, le=100)
    weight_factor: float | None = Field(default=None, ge=0)
    active: bool = True


class ColorConfig(BaseModel):
    """Door colour with surcharge and minimum-order service fee tiers.

    Attributes:
        service_fee_tier1_max: Upper bound of tier 1 (inclusive).
        service_fee_tier2_max: Upper bound of tier 2 (inclusive); must be
            greater than service_fee_tier1_max when both are set.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    surcharge_rate_per_sqm: float = Field(default=0.0, ge=0)
    minimum_order_amount: float = Field(default=0.0, ge=0)
    service_fee_tier1_max: float | None = Field(default=None, ge=0)
    service_fee_tier1_amount: float | None = Field(default=None, ge=0)
    service_fee_tier2_max: float | None = Field(default=None, ge=0)
    service_fee_tier2_amount: float | None = Field(default=None, ge=0)
    door_style_id: str | None = None
    active: bool = True

    @model_validator(mode="after")
    def validate_tiers(self) -> "ColorConfig":
        """Ensure tier 1 ends before tier 2."""
        if (
            self.service_fee_tier1_max is not None
            and self.service_fee_tier2_max is not None
            and self.service_fee_tier1_max >= self.service_fee_tier2_max
        ):
            raise ValueError(
                "service_fee_tier1_max must be less than service_fee_tier2_max"
            )
        return self


class FinishConfig(BaseModel):
    """Door finish; its rate adds to the door style rate."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    rate_per_sqm: float = Field(default=0.0, ge=0)
    active: bool = True


class CabinetPartConfig(BaseModel):
    """A panel or hardware placeholder of a cabinet type.

    Formulas are arithmetic expressions over ``width``, ``height`` and
    ``depth``, e.g. ``"height - 36"``.
    """

    model_config = ConfigDict(extra="forbid")

    part_name: str = Field(..., min_length=1)
    width_formula: str | None = Field(default=None, max_length=256)
    height_formula: str | None = Field(default=None, max_length=256)
    quantity: int = Field(default=1, ge=0, le=100)
    is_door: bool = False
    is_hardware: bool = False
    material_thickness_mm: float | None = Field(default=None, gt=0, le=100)
    material_density_kg_per_sqm: float | None = Field(default=None, ge=0)
    weight_multiplier: float = Field(default=1.0, ge=0)

    @model_validator(mode="after")
    def validate_role(self) -> "CabinetPartConfig":
        """A part is a door, a hardware placeholder, or neither."""
        if self.is_door and self.is_hardware:
            raise ValueError("A part cannot be both a door and a hardware part")
        return self


class HardwareRequirementConfig(BaseModel):
    """Hardware a cabinet type needs per cabinet, door or drawer."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    unit_scope: UnitScopeConfig = UnitScopeConfig.PER_CABINET
    units_per_scope: float = Field(default=1, ge=0)
    active: bool = True


class CabinetTypeConfig(BaseModel):
    """A cabinet product with parts, hardware requirements and size bounds."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: CabinetCategoryConfig = CabinetCategoryConfig.BASE
    default_width_mm: float = Field(default=600, gt=0)
    default_height_mm: float = Field(default=720, gt=0)
    default_depth_mm: float = Field(default=560, gt=0)
    door_count: int = Field(default=0, ge=0, le=10)
    drawer_count: int = Field(default=0, ge=0, le=10)
    parts: list[CabinetPartConfig] = Field(default_factory=list)
    hardware_requirements: list[HardwareRequirementConfig] = Field(
        default_factory=list
    )
    min_width_mm: float | None = Field(default=None, gt=0)
    max_width_mm: float | None = Field(default=None, gt=0)
    min_height_mm: float | None = Field(default=None, gt=0)
    max_height_mm: float | None = Field(default=None, gt=0)
    min_depth_mm: float | None = Field(default=None, gt=0)
    max_depth_mm: float | None = Field(default=None, gt=0)
    active: bool = True

    @model_validator(mode="after")
    def validate_bounds(self) -> "CabinetTypeConfig":
        """Ensure each min bound does not exceed its max bound."""
        for label in ("width", "height", "depth"):
            low = getattr(self, f"min_{label}_mm")
            high = getattr(self, f"max_{label}_mm")
            if low is not None and high is not None and low > high:
                raise ValueError(f"min_{label}_mm cannot exceed max_{label}_mm")
        return self


class HardwareProductConfig(BaseModel):
    """A purchasable hardware product."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    cost_per_unit: float = Field(..., ge=0)


class HardwareOptionConfig(BaseModel):
    """Maps a requirement and brand to a single per-unit product."""

    model_config = ConfigDict(extra="forbid")

    requirement_id: str = Field(..., min_length=1)
    brand_id: str = Field(..., min_length=1)
    product_id: str = Field(..., min_length=1)
    active: bool = True


class HardwareSetItemConfig(BaseModel):
    """A product and how many of it a set contains."""

    model_config = ConfigDict(extra="forbid")

    product_id: str = Field(..., min_length=1)
    quantity: float = Field(default=1, gt=0)


class HardwareSetConfig(BaseModel):
    """A brand's bundle of products for one hardware category."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    brand_name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    set_name: str = Field(..., min_length=1)
    items: list[HardwareSetItemConfig] = Field(default_factory=list)
    is_default: bool = False
    brand_id: str | None = None


class RateCatalog(BaseModel):
    """Root model of a JSON rate catalog.

    Attributes:
        schema_version: Catalog format version.
        rate_version: Identifier of this snapshot of the rate tables.
        settings: Global settings as key/value rows or a plain mapping.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.2"
    rate_version: str | None = None
    settings: list[SettingRowConfig] | dict[str, str | float | int | None] = Field(
        default_factory=list
    )
    materials: list[MaterialConfig] = Field(default_factory=list)
    door_styles: list[DoorStyleConfig] = Field(default_factory=list)
    colors: list[ColorConfig] = Field(default_factory=list)
    finishes: list[FinishConfig] = Field(default_factory=list)
    cabinet_types: list[CabinetTypeConfig] = Field(default_factory=list)
    hardware_products: list[HardwareProductConfig] = Field(default_factory=list)
    hardware_options: list[HardwareOptionConfig] = Field(default_factory=list)
    hardware_sets: list[HardwareSetConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, value: str) -> str:
        """Reject catalog versions this release cannot read."""
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema_version '{value}'. Supported: {supported}"
            )
        return value

    @model_validator(mode="after")
    def validate_references(self) -> "RateCatalog":
        """Ensure ids are unique and every product reference resolves."""
        for name in ("door_styles", "colors", "finishes", "cabinet_types", "hardware_sets"):
            ids = [item.id for item in getattr(self, name)]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {name} ids: {', '.join(duplicates)}")

        product_ids = {product.id for product in self.hardware_products}
        for option in self.hardware_options:
            if option.product_id not in product_ids:
                raise ValueError(
                    f"hardware option references unknown product '{option.product_id}'"
                )
        for hardware_set in self.hardware_sets:
            for item in hardware_set.items:
                if item.product_id not in product_ids:
                    raise ValueError(
                        f"hardware set '{hardware_set.id}' references unknown "
                        f"product '{item.product_id}'"
                    )
        return self
