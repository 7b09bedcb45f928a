"""Configuration loading for the pricing engine.

This package provides JSON-based loading and validation of rate catalogs
and order requests, Pydantic schema models, adapters to domain objects and
advisory catalog checks.

Public API:
    - RateCatalog: Root rate catalog model
    - OrderRequestConfig: Order request model
    - load_catalog / load_catalog_from_dict: Load a catalog
    - load_order: Load an order request file
    - catalog_to_snapshot: Convert a catalog to a RateSnapshot
    - request_to_configuration: Convert a cabinet request to a domain configuration
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for catalog advisories
    - validate_catalog: Run all catalog advisory checks

Example:
    >>> from pathlib import Path
    >>> from cabinet_pricing.application.config import load_catalog, catalog_to_snapshot
    >>> snapshot = catalog_to_snapshot(load_catalog(Path("catalog.json")))
"""

from cabinet_pricing.application.config.adapter import (
    catalog_to_settings,
    catalog_to_snapshot,
    request_to_configuration,
    zone_to_domain,
)
from cabinet_pricing.application.config.loader import (
    ConfigError,
    load_catalog,
    load_catalog_from_dict,
    load_order,
)
from cabinet_pricing.application.config.schemas import (
    CabinetRequestConfig,
    OrderRequestConfig,
    PaymentCheckConfig,
    RateCatalog,
    ScheduleRequestConfig,
    ZoneQuoteConfig,
)
from cabinet_pricing.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_catalog,
)

__all__ = [
    "CabinetRequestConfig",
    "ConfigError",
    "OrderRequestConfig",
    "PaymentCheckConfig",
    "RateCatalog",
    "ScheduleRequestConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ZoneQuoteConfig",
    "catalog_to_settings",
    "catalog_to_snapshot",
    "load_catalog",
    "load_catalog_from_dict",
    "load_order",
    "request_to_configuration",
    "validate_catalog",
    "zone_to_domain",
]
