"""Reference data entities supplied by the rate repository.

Every entity here is immutable. The engine reads them and never mutates
them; repricing after a rate change means building a new snapshot and
running the calculation again.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import CabinetCategory, PartRole, UnitScope


@dataclass(frozen=True)
class CabinetPart:
    """A panel (or hardware placeholder) belonging to a cabinet type.

    Part dimensions are formulas over the ordered cabinet's width, height
    and depth, e.g. ``"width"`` or ``"height - 36"``.

    Attributes:
        part_name: Display name, e.g. "Back" or "Door".
        width_formula: Expression for the part width in mm.
        height_formula: Expression for the part height in mm.
        quantity: Pieces of this part per cabinet.
        is_door: True for door/front parts priced at door rates.
        is_hardware: True for hardware placeholders (weight only).
        material_thickness_mm: Board thickness, None to use the material default.
        material_density_kg_per_sqm: Areal density, None to use the default.
        weight_multiplier: Scaling applied to the carcass part weight.
    """

    part_name: str
    width_formula: str | None = None
    height_formula: str | None = None
    quantity: int = 1
    is_door: bool = False
    is_hardware: bool = False
    material_thickness_mm: float | None = None
    material_density_kg_per_sqm: float | None = None
    weight_multiplier: float = 1.0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Part quantity cannot be negative")
        if self.is_door and self.is_hardware:
            raise ValueError(
                f"Part '{self.part_name}' cannot be both a door and a hardware part"
            )
        if self.weight_multiplier < 0:
            raise ValueError("weight_multiplier cannot be negative")

    @property
    def role(self) -> PartRole:
        """Pricing role of this part (carcass, door or hardware)."""
        if self.is_door:
            return PartRole.DOOR
        if self.is_hardware:
            return PartRole.HARDWARE
        return PartRole.CARCASS


@dataclass(frozen=True)
class HardwareRequirement:
    """Hardware a cabinet type needs, e.g. two hinges per door.

    Attributes:
        id: Requirement identifier (matched by HardwareOption.requirement_id).
        category: Hardware category, e.g. "hinge" or "runner".
        unit_scope: Basis the quantity multiplies on.
        units_per_scope: Units needed per scope item.
        active: Inactive requirements are ignored.
    """

    id: str
    category: str
    unit_scope: UnitScope = UnitScope.PER_CABINET
    units_per_scope: float = 1
    active: bool = True

    def __post_init__(self) -> None:
        if self.units_per_scope < 0:
            raise ValueError("units_per_scope cannot be negative")


@dataclass(frozen=True)
class CabinetType:
    """A cabinet product with its parts and hardware requirements.

    ``door_count`` and ``drawer_count`` are authoritative for hardware
    quantities; they are never inferred from the type name.
    """

    id: str
    name: str
    category: CabinetCategory = CabinetCategory.BASE
    default_width_mm: float = 600
    default_height_mm: float = 720
    default_depth_mm: float = 560
    door_count: int = 0
    drawer_count: int = 0
    parts: tuple[CabinetPart, ...] = field(default_factory=tuple)
    hardware_requirements: tuple[HardwareRequirement, ...] = field(
        default_factory=tuple
    )
    min_width_mm: float | None = None
    max_width_mm: float | None = None
    min_height_mm: float | None = None
    max_height_mm: float | None = None
    min_depth_mm: float | None = None
    max_depth_mm: float | None = None
    active: bool = True

    def __post_init__(self) -> None:
        if self.door_count < 0 or self.drawer_count < 0:
            raise ValueError("door_count and drawer_count cannot be negative")
        for low, high, label in (
            (self.min_width_mm, self.max_width_mm, "width"),
            (self.min_height_mm, self.max_height_mm, "height"),
            (self.min_depth_mm, self.max_depth_mm, "depth"),
        ):
            if low is not None and high is not None and low > high:
                raise ValueError(f"min_{label}_mm cannot exceed max_{label}_mm")

    def parts_with_role(self, role: PartRole) -> tuple[CabinetPart, ...]:
        """Parts of this type playing the given pricing role."""
        return tuple(part for part in self.parts if part.role == role)

    @property
    def active_requirements(self) -> tuple[HardwareRequirement, ...]:
        """Hardware requirements that take part in pricing."""
        return tuple(req for req in self.hardware_requirements if req.active)


@dataclass(frozen=True)
class MaterialSpecification:
    """Carcass board material and its rates."""

    material_type: str
    cost_per_sqm: float
    density_kg_per_cubic_m: float = 0.0
    standard_thickness_mm: float = 18.0
    weight_factor: float = 1.0
    active: bool = True

    def __post_init__(self) -> None:
        if self.cost_per_sqm < 0:
            raise ValueError("cost_per_sqm cannot be negative")
        if self.standard_thickness_mm <= 0:
            raise ValueError("standard_thickness_mm must be positive")


@dataclass(frozen=True)
class DoorStyle:
    """Door style with its base rate and weight characteristics."""

    id: str
    name: str
    base_rate_per_sqm: float = 0.0
    material_density_kg_per_sqm: float | None = None
    thickness_mm: float | None = None
    weight_factor: float | None = None
    active: bool = True

    def __post_init__(self) -> None:
        if self.base_rate_per_sqm < 0:
            raise ValueError("base_rate_per_sqm cannot be negative")


@dataclass(frozen=True)
class Color:
    """Door colour with its surcharge and minimum-order service fee tiers.

    A colour total above ``service_fee_tier2_max`` but still below
    ``minimum_order_amount`` incurs no fee. That gap is existing policy and
    is preserved as-is.
    """

    id: str
    name: str
    surcharge_rate_per_sqm: float = 0.0
    minimum_order_amount: float = 0.0
    service_fee_tier1_max: float | None = None
    service_fee_tier1_amount: float | None = None
    service_fee_tier2_max: float | None = None
    service_fee_tier2_amount: float | None = None
    door_style_id: str | None = None
    active: bool = True

    def __post_init__(self) -> None:
        if self.surcharge_rate_per_sqm < 0:
            raise ValueError("surcharge_rate_per_sqm cannot be negative")
        if (
            self.service_fee_tier1_max is not None
            and self.service_fee_tier2_max is not None
            and self.service_fee_tier1_max >= self.service_fee_tier2_max
        ):
            raise ValueError(
                "service_fee_tier1_max must be less than service_fee_tier2_max"
            )


@dataclass(frozen=True)
class Finish:
    """Door finish; its rate adds to the door style rate."""

    id: str
    name: str
    rate_per_sqm: float = 0.0
    active: bool = True

    def __post_init__(self) -> None:
        if self.rate_per_sqm < 0:
            raise ValueError("rate_per_sqm cannot be negative")


@dataclass(frozen=True)
class HardwareProduct:
    """A purchasable hardware item."""

    id: str
    name: str
    cost_per_unit: float

    def __post_init__(self) -> None:
        if self.cost_per_unit < 0:
            raise ValueError("cost_per_unit cannot be negative")


@dataclass(frozen=True)
class HardwareOption:
    """Maps a hardware requirement and brand to a single per-unit product."""

    requirement_id: str
    brand_id: str
    product: HardwareProduct
    active: bool = True


@dataclass(frozen=True)
class HardwareSetItem:
    """A product and how many of it one set contains."""

    product: HardwareProduct
    quantity: float = 1

    @property
    def cost(self) -> float:
        """Cost of this item per set."""
        return self.product.cost_per_unit * self.quantity


@dataclass(frozen=True)
class HardwareBrandSet:
    """A brand's bundle of products sold together for one category."""

    id: str
    brand_name: str
    category: str
    set_name: str
    items: tuple[HardwareSetItem, ...] = field(default_factory=tuple)
    is_default: bool = False
    brand_id: str | None = None

    @property
    def unit_cost(self) -> float:
        """Base cost of one set before markup and discount."""
        return sum(item.cost for item in self.items)
