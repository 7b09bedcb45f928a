"""Tests for carcass cost calculation and material rate resolution."""

from __future__ import annotations

import pytest

from cabinet_pricing.domain.entities import CabinetPart, CabinetType, MaterialSpecification
from cabinet_pricing.domain.services import (
    CarcassCostCalculator,
    PricingSettings,
    resolve_material_rate,
)
from cabinet_pricing.domain.services.constants import FALLBACK_MATERIAL_RATE_PER_SQM
from cabinet_pricing.domain.value_objects import Dimensions, PartRole

MDF = MaterialSpecification(material_type="MDF", cost_per_sqm=100)
HMR = MaterialSpecification(material_type="HMR", cost_per_sqm=120)


class TestResolveMaterialRate:
    """Tests for the carcass rate precedence."""

    def test_selected_material_wins(self) -> None:
        rate = resolve_material_rate(HMR, MDF, PricingSettings(hmr_rate_per_sqm=1000))
        assert rate.rate_per_sqm == 120
        assert rate.source == "selected"
        assert rate.material_type == "HMR"

    def test_default_material_before_setting(self) -> None:
        rate = resolve_material_rate(None, MDF, PricingSettings(hmr_rate_per_sqm=1000))
        assert rate.rate_per_sqm == 100
        assert rate.source == "default_material"

    def test_hmr_setting_when_no_material(self) -> None:
        rate = resolve_material_rate(None, None, PricingSettings(hmr_rate_per_sqm=1000))
        assert rate.rate_per_sqm == 1000
        assert rate.source == "hmr_setting"
        assert rate.material_type == "HMR"
        assert rate.degraded is None

    def test_builtin_fallback_is_degraded(self, caplog: pytest.LogCaptureFixture) -> None:
        """Without any configured rate the constant applies and is flagged."""
        rate = resolve_material_rate(None, None, PricingSettings())
        assert rate.rate_per_sqm == FALLBACK_MATERIAL_RATE_PER_SQM
        assert rate.source == "fallback"
        assert rate.degraded is not None
        assert "fallback carcass rate" in caplog.text


class TestCarcassCostCalculator:
    """Tests for CarcassCostCalculator."""

    def test_back_panel_at_hmr_rate(self, back_panel_type: CabinetType) -> None:
        """A 750 x 720 back panel at 1000/m² costs 540."""
        rate = resolve_material_rate(None, None, PricingSettings(hmr_rate_per_sqm=1000))
        cost = CarcassCostCalculator().calculate(
            back_panel_type, Dimensions(750, 720, 560), 1, rate
        )

        assert cost.unit_cost == pytest.approx(540.0)
        assert cost.total == pytest.approx(540.0)
        assert len(cost.lines) == 1
        assert cost.lines[0].area_sqm == pytest.approx(0.54)

    def test_total_scales_with_quantity(self, back_panel_type: CabinetType) -> None:
        rate = resolve_material_rate(None, MDF, PricingSettings())
        cost = CarcassCostCalculator().calculate(
            back_panel_type, Dimensions(600, 720, 560), 3, rate
        )
        assert cost.unit_cost == pytest.approx(43.2)
        assert cost.total == pytest.approx(129.6)
        assert cost.lines[0].pieces == 3

    def test_part_quantity_and_roles(self) -> None:
        """Only carcass parts are priced; part quantity multiplies the cost."""
        cabinet_type = CabinetType(
            id="t",
            name="T",
            parts=(
                CabinetPart(part_name="Side", width_formula="depth", height_formula="height", quantity=2),
                CabinetPart(part_name="Door", width_formula="width", height_formula="height", is_door=True),
                CabinetPart(part_name="Hinges", is_hardware=True),
            ),
        )
        rate = resolve_material_rate(MDF, None, PricingSettings())
        cost = CarcassCostCalculator().calculate(cabinet_type, Dimensions(600, 720, 500), 1, rate)

        assert [line.part_name for line in cost.lines] == ["Side"]
        assert cost.lines[0].role == PartRole.CARCASS
        assert cost.lines[0].pieces == 2
        assert cost.unit_cost == pytest.approx(0.5 * 0.72 * 100 * 2)

    def test_non_positive_part_dimension_has_no_area(self) -> None:
        cabinet_type = CabinetType(
            id="t",
            name="T",
            parts=(
                CabinetPart(part_name="Filler", width_formula="width - 700", height_formula="height"),
                CabinetPart(part_name="Broken", width_formula="width +", height_formula="height"),
            ),
        )
        rate = resolve_material_rate(MDF, None, PricingSettings())
        cost = CarcassCostCalculator().calculate(cabinet_type, Dimensions(600, 720, 560), 1, rate)

        assert cost.unit_cost == 0.0
        assert all(line.area_sqm == 0.0 for line in cost.lines)


class TestDimensions:
    @pytest.mark.parametrize(
        "sizes", [(float("nan"), 720, 560), (600, float("inf"), 560), (600, 720, 0)]
    )
    def test_rejects_unusable_sizes(self, sizes: tuple[float, float, float]) -> None:
        with pytest.raises(ValueError):
            Dimensions(*sizes)
