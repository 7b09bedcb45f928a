"""Immutable snapshot of the rate tables used for one calculation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .entities import (
    CabinetType,
    Color,
    DoorStyle,
    Finish,
    HardwareBrandSet,
    HardwareOption,
    MaterialSpecification,
)
from .exceptions import CatalogLookupError
from .services.config import PricingSettings
from .services.constants import DEFAULT_MATERIAL_TYPE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateSnapshot:
    """All reference data one pricing run may consult.

    The repository layer fetches this once per request and passes it in;
    the engine never re-fetches mid-calculation. ``version`` identifies the
    snapshot a breakdown was computed from.
    """

    settings: PricingSettings = field(default_factory=PricingSettings)
    cabinet_types: tuple[CabinetType, ...] = field(default_factory=tuple)
    materials: tuple[MaterialSpecification, ...] = field(default_factory=tuple)
    door_styles: tuple[DoorStyle, ...] = field(default_factory=tuple)
    colors: tuple[Color, ...] = field(default_factory=tuple)
    finishes: tuple[Finish, ...] = field(default_factory=tuple)
    hardware_options: tuple[HardwareOption, ...] = field(default_factory=tuple)
    hardware_sets: tuple[HardwareBrandSet, ...] = field(default_factory=tuple)
    version: str | None = None

    def cabinet_type(self, cabinet_type_id: str) -> CabinetType:
        """Look up a cabinet type; it is required for any calculation.

        Raises:
            CatalogLookupError: If no cabinet type has the given id.
        """
        for cabinet_type in self.cabinet_types:
            if cabinet_type.id == cabinet_type_id:
                return cabinet_type
        raise CatalogLookupError("cabinet type", cabinet_type_id)

    def door_style(self, door_style_id: str | None) -> DoorStyle | None:
        """Look up an optional door style selection."""
        return self._find(self.door_styles, door_style_id, "door style")

    def color(self, color_id: str | None) -> Color | None:
        """Look up an optional colour selection."""
        return self._find(self.colors, color_id, "color")

    def finish(self, finish_id: str | None) -> Finish | None:
        """Look up an optional finish selection."""
        return self._find(self.finishes, finish_id, "finish")

    def material(self, material_type: str | None) -> MaterialSpecification | None:
        """Look up an active material specification by type (case-insensitive)."""
        if not material_type:
            return None
        wanted = material_type.lower()
        for material in self.materials:
            if material.active and material.material_type.lower() == wanted:
                return material
        logger.warning(f"Material '{material_type}' not found in rate snapshot")
        return None

    def default_material(self) -> MaterialSpecification | None:
        """The default carcass material: active MDF, else the first active spec."""
        active = [material for material in self.materials if material.active]
        for material in active:
            if material.material_type.upper() == DEFAULT_MATERIAL_TYPE:
                return material
        return active[0] if active else None

    def _find(self, items, identifier: str | None, kind: str):
        if not identifier:
            return None
        for item in items:
            if item.id == identifier:
                return item
        logger.warning(f"Selected {kind} '{identifier}' not found; contributing 0")
        return None
