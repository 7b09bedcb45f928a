"""FastAPI dependency injection for pricing services."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from cabinet_pricing.application.commands import (
    PaymentScheduleCommand,
    PriceCabinetCommand,
    PriceListCommand,
    PriceOrderCommand,
)
from cabinet_pricing.application.factory import ServiceFactory, get_factory
from cabinet_pricing.domain.rates import RateSnapshot

CATALOG_ENV_VAR = "CABINET_PRICING_CATALOG"


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory, pointed at the catalog named by the environment."""
    factory = get_factory()
    catalog = os.environ.get(CATALOG_ENV_VAR)
    if factory.catalog_path is None and catalog:
        factory.catalog_path = Path(catalog)
    return factory


def get_snapshot(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> RateSnapshot:
    """Rate snapshot for one request; fetched once and passed to the engine."""
    return factory.get_rate_repository().load()


def get_price_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PriceCabinetCommand:
    return factory.create_price_command()


def get_order_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PriceOrderCommand:
    return factory.create_order_command()


def get_schedule_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PaymentScheduleCommand:
    return factory.create_schedule_command()


def get_price_list_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> PriceListCommand:
    return factory.create_price_list_command()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
SnapshotDep = Annotated[RateSnapshot, Depends(get_snapshot)]
PriceCommandDep = Annotated[PriceCabinetCommand, Depends(get_price_command)]
OrderCommandDep = Annotated[PriceOrderCommand, Depends(get_order_command)]
ScheduleCommandDep = Annotated[PaymentScheduleCommand, Depends(get_schedule_command)]
PriceListCommandDep = Annotated[PriceListCommand, Depends(get_price_list_command)]
