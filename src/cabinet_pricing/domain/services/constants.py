"""Pricing and shipping constants.

Defaults match the values the storefront has always used when a global
setting is missing.
"""

from __future__ import annotations

# Global setting defaults
DEFAULT_GST_RATE = 0.10
DEFAULT_HARDWARE_BASE_COST = 45.0
DEFAULT_HARDWARE_MARKUP_PERCENTAGE = 35.0
DEFAULT_HARDWARE_DISCOUNT_PERCENTAGE = 0.0

# Carcass rate used only when no material specification and no HMR setting exist
FALLBACK_MATERIAL_RATE_PER_SQM = 85.0

# Material preferred as the default carcass specification
DEFAULT_MATERIAL_TYPE = "MDF"

# Weight estimation defaults
DEFAULT_PANEL_DENSITY_KG_PER_SQM = 12.0
DEFAULT_PANEL_THICKNESS_MM = 18.0
HARDWARE_BASE_WEIGHT_KG = 2.5
REFERENCE_CABINET_WIDTH_MM = 600.0
REFERENCE_CABINET_HEIGHT_MM = 720.0

# Shipping carton padding added to each cabinet dimension
PACKAGE_PADDING_MM = 50.0

# Payment schedule defaults
DEFAULT_DEPOSIT_PERCENTAGE = 20.0
DEFAULT_DEPOSIT_DUE_DAYS = 7
DEFAULT_BALANCE_DUE_DAYS = 30

# Cart line consistency tolerance (total vs unit price x quantity)
PRICE_TOLERANCE = 0.01

# Settings key prefix/suffix for configured default hardware sets,
# e.g. "default_hinge_set_id"
DEFAULT_SET_KEY_PREFIX = "default_"
DEFAULT_SET_KEY_SUFFIX = "_set_id"
