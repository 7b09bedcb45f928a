"""Tests for catalog and order loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cabinet_pricing.application.config import (
    ConfigError,
    RateCatalog,
    load_catalog,
    load_catalog_from_dict,
    load_order,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "catalogs"


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_valid_catalog(self, catalog_path: Path) -> None:
        catalog = load_catalog(catalog_path)

        assert isinstance(catalog, RateCatalog)
        assert catalog.rate_version == "2026-10-01"
        assert len(catalog.cabinet_types) == 4
        assert catalog.cabinet_types[0].parts[3].is_door

    def test_file_not_found(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(FIXTURES_PATH / "nonexistent.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(FIXTURES_PATH / "invalid_json.json")
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] >= 1

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(FIXTURES_PATH / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "materials[0].colour"
        assert "Configuration validation failed" in error.message

    def test_unsupported_schema_version(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"schema_version": "2.0"}))
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(path)
        assert "Unsupported schema_version" in exc_info.value.message


class TestCatalogSchema:
    """Tests for cross-field catalog validation."""

    def test_duplicate_ids(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog_from_dict(
                {"finishes": [{"id": "matt", "name": "Matt"}, {"id": "matt", "name": "Matt 2"}]}
            )
        assert "Duplicate finishes ids: matt" in exc_info.value.message

    def test_unknown_product_reference(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog_from_dict(
                {
                    "hardware_sets": [
                        {
                            "id": "s",
                            "brand_name": "B",
                            "category": "hinge",
                            "set_name": "S",
                            "items": [{"product_id": "ghost"}],
                        }
                    ]
                }
            )
        assert "unknown product 'ghost'" in exc_info.value.message

    def test_colour_tiers_must_increase(self) -> None:
        with pytest.raises(ConfigError):
            load_catalog_from_dict(
                {
                    "colors": [
                        {
                            "id": "c",
                            "name": "C",
                            "service_fee_tier1_max": 3000,
                            "service_fee_tier2_max": 2000,
                        }
                    ]
                }
            )

    def test_part_cannot_be_door_and_hardware(self) -> None:
        with pytest.raises(ConfigError):
            load_catalog_from_dict(
                {
                    "cabinet_types": [
                        {
                            "id": "t",
                            "name": "T",
                            "parts": [{"part_name": "X", "is_door": True, "is_hardware": True}],
                        }
                    ]
                }
            )

    def test_settings_as_mapping(self) -> None:
        catalog = load_catalog_from_dict({"settings": {"gst_rate": 0.15}})
        assert catalog.settings == {"gst_rate": 0.15}


class TestLoadOrder:
    def test_valid_order(self, order_path: Path) -> None:
        order = load_order(order_path)
        assert len(order.items) == 2
        assert order.items[0].quantity == 2
        assert order.zone is not None
        assert order.zone.lead_time_days == 14
        assert order.assembly

    def test_empty_order_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "order.json"
        path.write_text(json.dumps({"items": []}))
        with pytest.raises(ConfigError) as exc_info:
            load_order(path)
        assert exc_info.value.details[0]["path"] == "items"
