"""Part dimension resolution and area calculation."""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import CabinetPart
from ..value_objects import Dimensions, PartRole
from .formula import FormulaEvaluator

__all__ = ["PartMeasurement", "PartGeometryService"]


@dataclass(frozen=True)
class PartMeasurement:
    """Resolved size of one cabinet part for a given cabinet size.

    Attributes:
        part: The part definition.
        width_mm: Resolved part width.
        height_mm: Resolved part height.
    """

    part: CabinetPart
    width_mm: float
    height_mm: float

    @property
    def area_sqm(self) -> float:
        """Area of one piece in square metres.

        Parts that resolve to a non-positive width or height have no area.
        """
        if self.width_mm <= 0 or self.height_mm <= 0:
            return 0.0
        return (self.width_mm / 1000) * (self.height_mm / 1000)

    @property
    def total_area_sqm(self) -> float:
        """Area of all pieces of this part in one cabinet."""
        return self.area_sqm * self.part.quantity

    @property
    def role(self) -> PartRole:
        return self.part.role


class PartGeometryService:
    """Resolves part formulas against cabinet dimensions."""

    def __init__(self, evaluator: FormulaEvaluator | None = None) -> None:
        self.evaluator = evaluator or FormulaEvaluator()

    def measure(self, part: CabinetPart, dimensions: Dimensions) -> PartMeasurement:
        """Resolve one part's width and height."""
        args = (dimensions.width_mm, dimensions.height_mm, dimensions.depth_mm)
        return PartMeasurement(
            part=part,
            width_mm=self.evaluator.evaluate(part.width_formula, *args),
            height_mm=self.evaluator.evaluate(part.height_formula, *args),
        )

    def measure_all(
        self,
        parts: tuple[CabinetPart, ...] | list[CabinetPart],
        dimensions: Dimensions,
        role: PartRole | None = None,
    ) -> list[PartMeasurement]:
        """Resolve every part, optionally only those with a given role."""
        return [
            self.measure(part, dimensions)
            for part in parts
            if role is None or part.role == role
        ]
