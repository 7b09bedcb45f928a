"""Enumerations shared across the pricing domain."""

from __future__ import annotations

from enum import Enum


class CabinetCategory(str, Enum):
    """Product categories of cabinet types."""

    BASE = "base"
    WALL = "wall"
    PANTRY = "pantry"
    DRESS_PANEL = "dress_panel"


class PartRole(str, Enum):
    """Role of a cabinet part in pricing and weight calculations."""

    CARCASS = "carcass"
    DOOR = "door"
    HARDWARE = "hardware"


class UnitScope(str, Enum):
    """Basis on which a hardware requirement's quantity multiplies.

    - PER_CABINET: units_per_scope for every cabinet ordered
    - PER_DOOR: units_per_scope for every door of every cabinet
    - PER_DRAWER: units_per_scope for every drawer of every cabinet
    """

    PER_CABINET = "per_cabinet"
    PER_DOOR = "per_door"
    PER_DRAWER = "per_drawer"


class HardwareSource(str, Enum):
    """Where a hardware cost line came from.

    FALLBACK marks the flat `hardware_base_cost` line used when a cabinet
    type has no hardware configured, so callers can flag it.
    """

    EXPLICIT = "explicit"
    CONFIGURED_DEFAULT = "configured_default"
    FLAGGED_DEFAULT = "flagged_default"
    FALLBACK = "fallback"
    UNRESOLVED = "unresolved"


class FeeTier(str, Enum):
    """Service fee tier applied to a colour's order total."""

    TIER1 = "tier1"
    TIER2 = "tier2"
    NONE = "none"


class PaymentType(str, Enum):
    """Kinds of payment checked against a payment schedule."""

    DEPOSIT = "deposit"
    BALANCE = "balance"
    FULL = "full"
