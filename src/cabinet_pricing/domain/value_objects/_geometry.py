"""Dimension and packaging value objects (all lengths in millimetres)."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Immutable cabinet dimensions in millimetres."""

    width_mm: float
    height_mm: float
    depth_mm: float

    def __post_init__(self) -> None:
        sizes = (self.width_mm, self.height_mm, self.depth_mm)
        if not all(math.isfinite(size) for size in sizes):
            raise ValueError("All dimensions must be finite")
        if min(sizes) <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def face_area_sqm(self) -> float:
        """Front face area (width x height) in square metres."""
        return (self.width_mm / 1000) * (self.height_mm / 1000)


@dataclass(frozen=True)
class PackageDimensions:
    """Padded shipping carton dimensions.

    Attributes:
        length_mm: Carton length (cabinet width plus padding).
        width_mm: Carton width (cabinet depth plus padding).
        height_mm: Carton height (cabinet height plus padding).
    """

    length_mm: float
    width_mm: float
    height_mm: float

    @property
    def cubic_m(self) -> float:
        """Carton volume in cubic metres."""
        return (self.length_mm * self.width_mm * self.height_mm) / 1_000_000_000

    @classmethod
    def around(cls, dimensions: Dimensions, padding_mm: float) -> PackageDimensions:
        """Build the carton for a cabinet with fixed padding on each axis."""
        return cls(
            length_mm=dimensions.width_mm + padding_mm,
            width_mm=dimensions.depth_mm + padding_mm,
            height_mm=dimensions.height_mm + padding_mm,
        )
