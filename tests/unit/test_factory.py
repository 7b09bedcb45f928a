"""Tests for the service factory and rate repositories."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

from cabinet_pricing.application.commands import PriceCabinetCommand
from cabinet_pricing.application.config import ConfigError
from cabinet_pricing.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from cabinet_pricing.contracts import (
    InputValidatorProtocol,
    PricingServiceProtocol,
    RateRepositoryProtocol,
    WeightCalculatorProtocol,
)
from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.domain.services import DimensionLimits
from cabinet_pricing.infrastructure.catalog import InMemoryRateRepository, JsonRateRepository


class TestServiceFactory:
    """Tests for ServiceFactory."""

    def test_services_are_cached(self, catalog_path: Path) -> None:
        factory = ServiceFactory(catalog_path=catalog_path)

        assert factory.get_pricing_service() is factory.get_pricing_service()
        assert factory.get_weight_calculator() is factory.get_weight_calculator()
        assert factory.get_rate_repository() is factory.get_rate_repository()

    def test_services_satisfy_protocols(self, catalog_path: Path) -> None:
        factory = ServiceFactory(catalog_path=catalog_path)

        assert isinstance(factory.get_rate_repository(), RateRepositoryProtocol)
        assert isinstance(factory.get_pricing_service(), PricingServiceProtocol)
        assert isinstance(factory.get_weight_calculator(), WeightCalculatorProtocol)
        assert isinstance(factory.get_input_validator(), InputValidatorProtocol)

    def test_limits_reach_the_services(self) -> None:
        limits = DimensionLimits(max_quantity=5)
        factory = ServiceFactory(limits=limits)

        assert factory.get_pricing_service().limits is limits
        assert factory.get_input_validator().limits is limits

    def test_commands_share_services(self) -> None:
        factory = ServiceFactory()
        command = factory.create_price_command()

        assert isinstance(command, PriceCabinetCommand)
        assert command.pricing_service is factory.get_pricing_service()
        assert (
            factory.create_price_list_command().generator.pricing_service
            is factory.get_pricing_service()
        )

    def test_missing_catalog(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ServiceFactory().get_rate_repository()
        assert exc_info.value.error_type == "not_configured"

    def test_custom_repository(self, snapshot: RateSnapshot) -> None:
        factory = ServiceFactory()
        factory.set_rate_repository(InMemoryRateRepository(snapshot))
        assert factory.get_rate_repository().load() is snapshot


class TestDefaultFactory:
    def teardown_method(self) -> None:
        reset_factory()

    def test_get_factory_is_singleton(self) -> None:
        assert get_factory() is get_factory()

    def test_set_and_reset(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom


class TestJsonRateRepository:
    """Tests for JsonRateRepository."""

    def test_snapshot_is_reused(self, catalog_path: Path) -> None:
        repository = JsonRateRepository(catalog_path)
        assert repository.load() is repository.load()

    def test_reloads_when_file_changes(self, catalog_path: Path, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        shutil.copy(catalog_path, path)
        repository = JsonRateRepository(path)
        first = repository.load()

        path.write_text(path.read_text().replace('"2026-10-01"', '"2026-11-01"'))
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))

        second = repository.load()
        assert second is not first
        assert second.version == "2026-11-01"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            JsonRateRepository(tmp_path / "missing.json").load()
        assert exc_info.value.error_type == "file_not_found"
