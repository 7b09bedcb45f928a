"""Tests for weight, volume and package estimation."""

from __future__ import annotations

import pytest

from cabinet_pricing.domain.entities import CabinetPart, CabinetType, DoorStyle, MaterialSpecification
from cabinet_pricing.domain.services import WeightCalculator
from cabinet_pricing.domain.value_objects import Dimensions, PackageDimensions, PartRole


@pytest.fixture
def cabinet_type() -> CabinetType:
    return CabinetType(
        id="base",
        name="Base",
        door_count=1,
        parts=(
            CabinetPart(part_name="Back", width_formula="width", height_formula="height"),
            CabinetPart(
                part_name="Side",
                width_formula="depth",
                height_formula="height",
                quantity=2,
                material_density_kg_per_sqm=20,
                weight_multiplier=1.5,
            ),
            CabinetPart(
                part_name="Door", width_formula="width", height_formula="height", is_door=True
            ),
            CabinetPart(part_name="Hinges", is_hardware=True, quantity=2),
        ),
    )


class TestWeightCalculator:
    """Tests for WeightCalculator."""

    def test_component_weights_for_one_cabinet(self, cabinet_type: CabinetType) -> None:
        weight = WeightCalculator().calculate(cabinet_type, Dimensions(600, 720, 500))

        back = 0.6 * 0.72 * 12
        sides = 0.5 * 0.72 * 20 * 1.5 * 2
        assert weight.carcass_weight_kg == pytest.approx(back + sides)
        assert weight.door_weight_kg == pytest.approx(0.6 * 0.72 * 12)
        assert weight.hardware_weight_kg == pytest.approx(5.0)
        assert weight.unit_weight_kg == pytest.approx(
            weight.carcass_weight_kg + weight.door_weight_kg + weight.hardware_weight_kg
        )

    def test_door_style_density_and_factor(self, cabinet_type: CabinetType) -> None:
        style = DoorStyle(
            id="shaker", name="Shaker", material_density_kg_per_sqm=15, weight_factor=1.2
        )
        weight = WeightCalculator().calculate(
            cabinet_type, Dimensions(600, 720, 500), door_style=style
        )
        assert weight.door_weight_kg == pytest.approx(0.432 * 15 * 1.2)

    def test_hardware_scales_with_face_area(self, cabinet_type: CabinetType) -> None:
        weight = WeightCalculator().calculate(cabinet_type, Dimensions(1200, 720, 500))
        assert weight.hardware_weight_kg == pytest.approx(10.0)

    def test_total_scales_with_quantity(self, cabinet_type: CabinetType) -> None:
        one = WeightCalculator().calculate(cabinet_type, Dimensions(600, 720, 500), 1)
        four = WeightCalculator().calculate(cabinet_type, Dimensions(600, 720, 500), 4)

        assert four.unit_weight_kg == pytest.approx(one.unit_weight_kg)
        assert four.total_weight_kg == pytest.approx(one.total_weight_kg * 4)
        assert four.shipping_volume_cubic_m == pytest.approx(one.shipping_volume_cubic_m * 4)

    def test_package_adds_padding_per_axis(self, cabinet_type: CabinetType) -> None:
        weight = WeightCalculator().calculate(cabinet_type, Dimensions(600, 720, 500))
        package = weight.package_dimensions

        assert package == PackageDimensions(length_mm=650, width_mm=550, height_mm=770)
        assert package.cubic_m == pytest.approx(0.650 * 0.550 * 0.770)

    def test_part_volumes_use_material_thickness(self, cabinet_type: CabinetType) -> None:
        material = MaterialSpecification(
            material_type="HMR", cost_per_sqm=120, standard_thickness_mm=16
        )
        weight = WeightCalculator().calculate(
            cabinet_type, Dimensions(600, 720, 500), 2, material=material
        )

        back = next(v for v in weight.part_volumes if v.part_name == "Back")
        assert back.thickness_mm == 16
        assert back.pieces == 2
        assert back.volume_cubic_m == pytest.approx(0.432 * 0.016 * 2)
        assert {v.role for v in weight.part_volumes} == {PartRole.CARCASS, PartRole.DOOR}
        assert weight.total_volume_cubic_m == pytest.approx(
            weight.carcass_volume_cubic_m + weight.door_volume_cubic_m
        )

    def test_custom_padding(self, cabinet_type: CabinetType) -> None:
        weight = WeightCalculator(padding_mm=0).calculate(
            cabinet_type, Dimensions(600, 720, 500)
        )
        assert weight.package_dimensions.length_mm == 600
