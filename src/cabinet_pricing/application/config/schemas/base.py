"""Base enums and shared models for pricing configuration schemas.

Enums are imported directly from the domain layer, which defines them as
``(str, Enum)`` so they serialize to plain JSON strings.
"""

from pydantic import BaseModel, ConfigDict, Field

from cabinet_pricing.domain.value_objects import (
    CabinetCategory,
    PaymentType,
    UnitScope,
)

# Supported catalog format versions
# Version 1.0: Initial catalog with materials, door styles, colours and cabinet types
# Version 1.1: Added hardware options and brand sets
# Version 1.2: Added per-type dimension bounds
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1", "1.2"})

# Aliases used by the schema modules
CabinetCategoryConfig = CabinetCategory
UnitScopeConfig = UnitScope
PaymentTypeConfig = PaymentType


class SettingRowConfig(BaseModel):
    """A global settings row as stored by the rate repository.

    Attributes:
        setting_key: Setting name, e.g. "gst_rate" or "default_hinge_set_id".
        setting_value: Raw value; numeric settings may be stored as strings.
    """

    model_config = ConfigDict(extra="forbid")

    setting_key: str = Field(..., min_length=1)
    setting_value: str | float | int | None = None
