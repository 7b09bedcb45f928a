"""Pytest configuration and shared fixtures for pricing tests."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from cabinet_pricing.application.config import catalog_to_snapshot, load_catalog
from cabinet_pricing.domain.entities import (
    CabinetPart,
    CabinetType,
    Color,
    DoorStyle,
    Finish,
)
from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.domain.services import PricingSettings

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "catalogs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or HTTP API end to end"
    )


# =============================================================================
# Catalog fixtures
# =============================================================================


@pytest.fixture
def catalog_path() -> Path:
    """Path to the sample rate catalog."""
    return FIXTURES_PATH / "catalog.json"


@pytest.fixture
def order_path() -> Path:
    """Path to the sample order request."""
    return FIXTURES_PATH / "order.json"


@pytest.fixture
def snapshot(catalog_path: Path) -> RateSnapshot:
    """Rate snapshot built from the sample catalog."""
    return catalog_to_snapshot(load_catalog(catalog_path))


@pytest.fixture
def fixed_now() -> datetime:
    """Reference time for due and dispatch dates."""
    return datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


# =============================================================================
# Small hand-built reference data
# =============================================================================


@pytest.fixture
def back_panel_type() -> CabinetType:
    """A cabinet type whose only part is a full-size back panel."""
    return CabinetType(
        id="back-only",
        name="Back Only",
        parts=(CabinetPart(part_name="Back", width_formula="width", height_formula="height"),),
    )


@pytest.fixture
def single_door_type() -> CabinetType:
    """A cabinet type with a single full-size door."""
    return CabinetType(
        id="door-only",
        name="Door Only",
        door_count=1,
        parts=(
            CabinetPart(
                part_name="Door", width_formula="width", height_formula="height", is_door=True
            ),
        ),
    )


@pytest.fixture
def hmr_snapshot(back_panel_type: CabinetType, single_door_type: CabinetType) -> RateSnapshot:
    """Snapshot with no material specifications and an HMR rate of 1000/m²."""
    return RateSnapshot(
        settings=PricingSettings(hmr_rate_per_sqm=1000),
        cabinet_types=(back_panel_type, single_door_type),
        door_styles=(DoorStyle(id="shaker", name="Shaker", base_rate_per_sqm=2000),),
        colors=(Color(id="navy", name="Navy", surcharge_rate_per_sqm=200),),
        finishes=(Finish(id="matt", name="Matt"),),
        version="test",
    )
