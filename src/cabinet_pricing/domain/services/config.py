"""Pricing settings snapshot.

This module provides PricingSettings, the immutable global-settings
snapshot passed explicitly into every calculation. Nothing in the engine
reads settings from ambient state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .constants import (
    DEFAULT_GST_RATE,
    DEFAULT_HARDWARE_BASE_COST,
    DEFAULT_HARDWARE_DISCOUNT_PERCENTAGE,
    DEFAULT_HARDWARE_MARKUP_PERCENTAGE,
    DEFAULT_SET_KEY_PREFIX,
    DEFAULT_SET_KEY_SUFFIX,
)

logger = logging.getLogger(__name__)

_NUMERIC_KEYS = {
    "gst_rate": "gst_rate",
    "hmr_rate_per_sqm": "hmr_rate_per_sqm",
    "hardware_base_cost": "hardware_base_cost",
    "hardware_markup_percentage": "hardware_markup_percentage",
    "hardware_discount_percentage": "hardware_discount_percentage",
}


@dataclass(frozen=True)
class PricingSettings:
    """Global pricing settings for one calculation.

    Attributes:
        gst_rate: GST as a fraction (0.10 for 10%).
        hmr_rate_per_sqm: HMR carcass board rate, used when no material
            specification is available. None when not configured.
        hardware_base_cost: Flat hardware charge per cabinet when a cabinet
            type has no hardware requirements configured.
        hardware_markup_percentage: Markup applied to hardware base cost.
        hardware_discount_percentage: Discount applied after markup.
        default_set_ids: Configured default hardware set id per category.
    """

    gst_rate: float = DEFAULT_GST_RATE
    hmr_rate_per_sqm: float | None = None
    hardware_base_cost: float = DEFAULT_HARDWARE_BASE_COST
    hardware_markup_percentage: float = DEFAULT_HARDWARE_MARKUP_PERCENTAGE
    hardware_discount_percentage: float = DEFAULT_HARDWARE_DISCOUNT_PERCENTAGE
    default_set_ids: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0 <= self.gst_rate <= 1:
            raise ValueError("gst_rate must be between 0 and 1")
        if self.hmr_rate_per_sqm is not None and self.hmr_rate_per_sqm < 0:
            raise ValueError("hmr_rate_per_sqm cannot be negative")
        if self.hardware_base_cost < 0:
            raise ValueError("hardware_base_cost cannot be negative")
        if self.hardware_markup_percentage < 0:
            raise ValueError("hardware_markup_percentage cannot be negative")
        if not 0 <= self.hardware_discount_percentage <= 100:
            raise ValueError("hardware_discount_percentage must be between 0 and 100")
        object.__setattr__(
            self, "default_set_ids", MappingProxyType(dict(self.default_set_ids))
        )

    def default_set_id(self, category: str) -> str | None:
        """Configured default hardware set id for a category, if any."""
        return self.default_set_ids.get(category)

    @classmethod
    def from_rows(
        cls, rows: Iterable[Mapping[str, Any]] | Mapping[str, Any]
    ) -> PricingSettings:
        """Build settings from global-settings key/value rows.

        Accepts either rows shaped like ``{"setting_key": ..., "setting_value": ...}``
        or a plain ``{key: value}`` mapping. Unknown keys are ignored and
        unparseable numeric values fall back to their defaults.

        Args:
            rows: Global settings as stored by the rate repository.

        Returns:
            A PricingSettings snapshot.
        """
        if isinstance(rows, Mapping):
            pairs = list(rows.items())
        else:
            pairs = [(row["setting_key"], row.get("setting_value")) for row in rows]

        kwargs: dict[str, Any] = {}
        default_set_ids: dict[str, str] = {}
        for key, value in pairs:
            if key in _NUMERIC_KEYS:
                if value is None or value == "":
                    continue
                try:
                    kwargs[_NUMERIC_KEYS[key]] = float(value)
                except (TypeError, ValueError):
                    logger.warning(
                        f"Ignoring unparseable global setting {key}={value!r}"
                    )
            elif key.startswith(DEFAULT_SET_KEY_PREFIX) and key.endswith(
                DEFAULT_SET_KEY_SUFFIX
            ):
                category = key[len(DEFAULT_SET_KEY_PREFIX) : -len(DEFAULT_SET_KEY_SUFFIX)]
                if category and value:
                    default_set_ids[category] = str(value)

        return cls(default_set_ids=default_set_ids, **kwargs)
