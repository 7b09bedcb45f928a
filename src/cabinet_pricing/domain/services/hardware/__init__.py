"""Hardware pricing package.

This package provides the hardware cost resolver and its parts:
- Data models for resolution inputs and priced lines
- The ordered resolution chain (explicit, configured default, flagged default)
- HardwareCostResolver, which derives quantities and applies markup/discount

Example:
    >>> from cabinet_pricing.domain.services.hardware import HardwareCostResolver
    >>> cost = HardwareCostResolver().calculate(cabinet_type, 2, settings, sets=sets)
    >>> cost.total
"""

from .calculator import HardwareCostResolver, apply_markup, required_quantity
from .models import HardwareContext, HardwareCost, HardwareLine, HardwareResolution
from .resolution import (
    DEFAULT_STRATEGIES,
    ConfiguredDefaultStrategy,
    ExplicitSelectionStrategy,
    FlaggedDefaultStrategy,
    HardwareResolutionChain,
    ResolutionStrategy,
)

__all__ = [
    # Resolver
    "HardwareCostResolver",
    "apply_markup",
    "required_quantity",
    # Data models
    "HardwareContext",
    "HardwareCost",
    "HardwareLine",
    "HardwareResolution",
    # Resolution chain
    "DEFAULT_STRATEGIES",
    "ConfiguredDefaultStrategy",
    "ExplicitSelectionStrategy",
    "FlaggedDefaultStrategy",
    "HardwareResolutionChain",
    "ResolutionStrategy",
]
