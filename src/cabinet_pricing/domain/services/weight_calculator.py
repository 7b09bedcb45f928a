"""Shipping weight, volume and package size estimation.

This module provides the WeightCalculator class, which estimates the
weight of a cabinet line item from its part areas and the carton it ships
in. It is independent of pricing; its output feeds an external shipping
quote.

Component weights are for a single cabinet; ``total_weight_kg`` covers
the whole line item. Material volumes cover the whole line item.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..entities import CabinetType, DoorStyle, MaterialSpecification
from ..value_objects import Dimensions, PackageDimensions, PartRole
from .constants import (
    DEFAULT_PANEL_DENSITY_KG_PER_SQM,
    DEFAULT_PANEL_THICKNESS_MM,
    HARDWARE_BASE_WEIGHT_KG,
    PACKAGE_PADDING_MM,
    REFERENCE_CABINET_HEIGHT_MM,
    REFERENCE_CABINET_WIDTH_MM,
)
from .part_geometry import PartGeometryService, PartMeasurement

logger = logging.getLogger(__name__)

__all__ = ["PartVolume", "WeightBreakdown", "WeightCalculator"]


@dataclass(frozen=True)
class PartVolume:
    """Board volume of one part across a line item.

    Attributes:
        part_name: Name of the part.
        role: Carcass or door.
        pieces: Pieces across the line item.
        area_sqm: Area of one piece.
        thickness_mm: Board thickness used.
        volume_cubic_m: Volume of all pieces, scaled by the weight factor.
    """

    part_name: str
    role: PartRole
    pieces: int
    area_sqm: float
    thickness_mm: float
    volume_cubic_m: float


@dataclass(frozen=True)
class WeightBreakdown:
    """Estimated weight and packaging of a cabinet line item.

    Attributes:
        carcass_weight_kg: Carcass weight of one cabinet.
        door_weight_kg: Door weight of one cabinet.
        hardware_weight_kg: Estimated hardware weight of one cabinet.
        quantity: Cabinets in the line item.
        package_dimensions: Padded carton for one cabinet.
        part_volumes: Board volume per part across the line item.
    """

    carcass_weight_kg: float
    door_weight_kg: float
    hardware_weight_kg: float
    quantity: int
    package_dimensions: PackageDimensions
    part_volumes: tuple[PartVolume, ...] = field(default_factory=tuple)

    @property
    def unit_weight_kg(self) -> float:
        """Weight of a single cabinet."""
        return self.carcass_weight_kg + self.door_weight_kg + self.hardware_weight_kg

    @property
    def total_weight_kg(self) -> float:
        """Weight of the whole line item."""
        return self.unit_weight_kg * self.quantity

    @property
    def carcass_volume_cubic_m(self) -> float:
        return sum(v.volume_cubic_m for v in self.part_volumes if v.role == PartRole.CARCASS)

    @property
    def door_volume_cubic_m(self) -> float:
        return sum(v.volume_cubic_m for v in self.part_volumes if v.role == PartRole.DOOR)

    @property
    def total_volume_cubic_m(self) -> float:
        return self.carcass_volume_cubic_m + self.door_volume_cubic_m

    @property
    def shipping_volume_cubic_m(self) -> float:
        """Carton volume of the whole line item."""
        return self.package_dimensions.cubic_m * self.quantity


class WeightCalculator:
    """Estimates cabinet weight, board volume and carton size.

    Carcass parts weigh area x areal density x weight multiplier x pieces,
    using 12 kg/m² when the part has no density. Door parts use the door
    style's density and weight factor, with the same defaults when no style
    is chosen. Each hardware placeholder adds 2.5 kg scaled by the cabinet's
    face area relative to a 600 x 720 mm reference cabinet.
    """

    def __init__(
        self,
        geometry: PartGeometryService | None = None,
        padding_mm: float = PACKAGE_PADDING_MM,
    ) -> None:
        self.geometry = geometry or PartGeometryService()
        self.padding_mm = padding_mm

    def calculate(
        self,
        cabinet_type: CabinetType,
        dimensions: Dimensions,
        quantity: int = 1,
        door_style: DoorStyle | None = None,
        material: MaterialSpecification | None = None,
    ) -> WeightBreakdown:
        """Estimate the weight and packaging of a line item.

        Args:
            cabinet_type: Cabinet type whose parts are weighed.
            dimensions: Ordered cabinet dimensions.
            quantity: Cabinets ordered.
            door_style: Selected door style, if any.
            material: Carcass material used for board thickness and weight
                factor in volume figures, if any.

        Returns:
            WeightBreakdown for the line item.
        """
        carcass_weight = 0.0
        door_weight = 0.0
        hardware_weight = 0.0
        volumes: list[PartVolume] = []

        size_multiplier = (dimensions.width_mm * dimensions.height_mm) / (
            REFERENCE_CABINET_WIDTH_MM * REFERENCE_CABINET_HEIGHT_MM
        )

        for measurement in self.geometry.measure_all(cabinet_type.parts, dimensions):
            part = measurement.part
            if measurement.role == PartRole.HARDWARE:
                hardware_weight += HARDWARE_BASE_WEIGHT_KG * size_multiplier * part.quantity
            elif measurement.role == PartRole.DOOR:
                door_weight += self._door_weight(measurement, door_style)
                volumes.append(self._door_volume(measurement, door_style, quantity))
            else:
                carcass_weight += self._carcass_weight(measurement)
                volumes.append(self._carcass_volume(measurement, material, quantity))

        breakdown = WeightBreakdown(
            carcass_weight_kg=carcass_weight,
            door_weight_kg=door_weight,
            hardware_weight_kg=hardware_weight,
            quantity=quantity,
            package_dimensions=PackageDimensions.around(dimensions, self.padding_mm),
            part_volumes=tuple(volumes),
        )
        logger.debug(
            f"Weight for {quantity} x {cabinet_type.name}: "
            f"{breakdown.total_weight_kg:.2f} kg, "
            f"carton {breakdown.package_dimensions.cubic_m:.4f} m³ each"
        )
        return breakdown

    def _carcass_weight(self, measurement: PartMeasurement) -> float:
        part = measurement.part
        density = part.material_density_kg_per_sqm or DEFAULT_PANEL_DENSITY_KG_PER_SQM
        return measurement.area_sqm * density * part.weight_multiplier * part.quantity

    def _door_weight(
        self, measurement: PartMeasurement, door_style: DoorStyle | None
    ) -> float:
        density = DEFAULT_PANEL_DENSITY_KG_PER_SQM
        weight_factor = 1.0
        if door_style is not None:
            density = door_style.material_density_kg_per_sqm or density
            weight_factor = door_style.weight_factor or weight_factor
        return measurement.area_sqm * density * weight_factor * measurement.part.quantity

    def _carcass_volume(
        self,
        measurement: PartMeasurement,
        material: MaterialSpecification | None,
        quantity: int,
    ) -> PartVolume:
        thickness = measurement.part.material_thickness_mm or (
            material.standard_thickness_mm if material else DEFAULT_PANEL_THICKNESS_MM
        )
        weight_factor = material.weight_factor if material else 1.0
        return self._volume(measurement, thickness, weight_factor, quantity)

    def _door_volume(
        self,
        measurement: PartMeasurement,
        door_style: DoorStyle | None,
        quantity: int,
    ) -> PartVolume:
        thickness = DEFAULT_PANEL_THICKNESS_MM
        weight_factor = 1.0
        if door_style is not None:
            thickness = door_style.thickness_mm or thickness
            weight_factor = door_style.weight_factor or weight_factor
        return self._volume(measurement, thickness, weight_factor, quantity)

    @staticmethod
    def _volume(
        measurement: PartMeasurement,
        thickness_mm: float,
        weight_factor: float,
        quantity: int,
    ) -> PartVolume:
        pieces = measurement.part.quantity * quantity
        per_piece = measurement.area_sqm * thickness_mm / 1000 * weight_factor
        return PartVolume(
            part_name=measurement.part.part_name,
            role=measurement.role,
            pieces=pieces,
            area_sqm=measurement.area_sqm,
            thickness_mm=thickness_mm,
            volume_cubic_m=per_piece * pieces,
        )
