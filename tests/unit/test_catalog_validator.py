"""Tests for catalog advisory checks."""

from __future__ import annotations

from pathlib import Path

from cabinet_pricing.application.config import (
    ValidationResult,
    load_catalog,
    load_catalog_from_dict,
    validate_catalog,
)
from cabinet_pricing.application.config.validator import (
    check_cabinet_advisories,
    check_formulas,
    check_pricing_advisories,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "catalogs"


class TestValidationResult:
    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "b").exit_code == 2
        assert ValidationResult().add_warning("a", "b").add_error("c", "d").exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "b")
        result.merge(ValidationResult().add_warning("c", "d"))
        assert not result.is_valid
        assert result.has_warnings


class TestValidateCatalog:
    """Tests for the catalog advisories."""

    def test_sample_catalog_is_clean(self, catalog_path: Path) -> None:
        result = validate_catalog(load_catalog(catalog_path))
        assert result.errors == []
        assert result.warnings == []

    def test_bad_formula_is_an_error(self) -> None:
        result = check_formulas(load_catalog(FIXTURES_PATH / "catalog_bad_formula.json"))
        assert len(result.errors) == 1
        assert result.errors[0].path == "cabinet_types[0].parts[0].width_formula"
        assert result.errors[0].value == "width * (height"

    def test_missing_formula_is_a_warning(self) -> None:
        catalog = load_catalog_from_dict(
            {"cabinet_types": [{"id": "t", "name": "T", "parts": [{"part_name": "Shelf"}]}]}
        )
        result = check_formulas(catalog)
        assert result.is_valid
        assert len(result.warnings) == 2

    def test_advisories(self) -> None:
        catalog = load_catalog(FIXTURES_PATH / "catalog_with_warnings.json")
        result = validate_catalog(catalog)

        assert result.is_valid
        messages = [w.message for w in result.warnings]
        assert "'Base Door' has door parts but door_count is 0" in messages
        assert "No hardware set or option covers 'hinge'" in messages
        assert "No active material and no hmr_rate_per_sqm setting" in messages
        assert "Colour 'Teal' totals between 2000 and 3000 incur no service fee" in messages
        assert result.exit_code == 2

    def test_per_drawer_requirement_without_drawers(self) -> None:
        catalog = load_catalog_from_dict(
            {
                "cabinet_types": [
                    {
                        "id": "t",
                        "name": "T",
                        "hardware_requirements": [
                            {"id": "r", "category": "runner", "unit_scope": "per_drawer"}
                        ],
                    }
                ],
                "hardware_products": [{"id": "p", "name": "P", "cost_per_unit": 1}],
                "hardware_sets": [
                    {
                        "id": "s",
                        "brand_name": "B",
                        "category": "runner",
                        "set_name": "S",
                        "items": [{"product_id": "p"}],
                    }
                ],
            }
        )
        result = check_cabinet_advisories(catalog)
        assert [w.message for w in result.warnings] == [
            "'T' has a per-drawer requirement but no drawers"
        ]

    def test_hmr_setting_silences_material_warning(self) -> None:
        catalog = load_catalog_from_dict(
            {"settings": [{"setting_key": "hmr_rate_per_sqm", "setting_value": 900}]}
        )
        assert check_pricing_advisories(catalog).warnings == []
