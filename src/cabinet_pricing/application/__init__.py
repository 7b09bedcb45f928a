"""Application layer - use cases and orchestration."""

from .commands import (
    PaymentScheduleCommand,
    PriceCabinetCommand,
    PriceListCommand,
    PriceOrderCommand,
)
from .dtos import CabinetPriceOutput, OrderOutput, PriceListOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "CabinetPriceOutput",
    "OrderOutput",
    "PaymentScheduleCommand",
    "PriceCabinetCommand",
    "PriceListCommand",
    "PriceListOutput",
    "PriceOrderCommand",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
