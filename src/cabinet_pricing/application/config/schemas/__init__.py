"""Configuration schema models for the pricing engine.

The schemas are organized into the following modules:
- base.py: Enums, version constants and shared models
- catalog_schema.py: The JSON rate catalog
- request_schema.py: Pricing, order and payment request payloads
"""

from cabinet_pricing.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    CabinetCategoryConfig as CabinetCategoryConfig,
    PaymentTypeConfig as PaymentTypeConfig,
    SettingRowConfig as SettingRowConfig,
    UnitScopeConfig as UnitScopeConfig,
)
from cabinet_pricing.application.config.schemas.catalog_schema import (
    CabinetPartConfig as CabinetPartConfig,
    CabinetTypeConfig as CabinetTypeConfig,
    ColorConfig as ColorConfig,
    DoorStyleConfig as DoorStyleConfig,
    FinishConfig as FinishConfig,
    HardwareOptionConfig as HardwareOptionConfig,
    HardwareProductConfig as HardwareProductConfig,
    HardwareRequirementConfig as HardwareRequirementConfig,
    HardwareSetConfig as HardwareSetConfig,
    HardwareSetItemConfig as HardwareSetItemConfig,
    MaterialConfig as MaterialConfig,
    RateCatalog as RateCatalog,
)
from cabinet_pricing.application.config.schemas.request_schema import (
    CabinetRequestConfig as CabinetRequestConfig,
    OrderRequestConfig as OrderRequestConfig,
    PaymentCheckConfig as PaymentCheckConfig,
    ScheduleRequestConfig as ScheduleRequestConfig,
    ZoneQuoteConfig as ZoneQuoteConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CabinetCategoryConfig",
    "CabinetPartConfig",
    "CabinetRequestConfig",
    "CabinetTypeConfig",
    "ColorConfig",
    "DoorStyleConfig",
    "FinishConfig",
    "HardwareOptionConfig",
    "HardwareProductConfig",
    "HardwareRequirementConfig",
    "HardwareSetConfig",
    "HardwareSetItemConfig",
    "MaterialConfig",
    "OrderRequestConfig",
    "PaymentCheckConfig",
    "PaymentTypeConfig",
    "RateCatalog",
    "ScheduleRequestConfig",
    "SettingRowConfig",
    "UnitScopeConfig",
    "ZoneQuoteConfig",
]
