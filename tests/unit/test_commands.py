"""Tests for application commands."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from cabinet_pricing.application.commands import (
    PaymentScheduleCommand,
    PriceCabinetCommand,
    PriceListCommand,
    PriceOrderCommand,
)
from cabinet_pricing.domain.exceptions import (
    CatalogLookupError,
    PricingValidationError,
    ScheduleMismatchError,
)
from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.domain.services import CabinetConfiguration, ZoneQuote
from cabinet_pricing.domain.value_objects import PaymentType

SHAKER_NAVY = CabinetConfiguration(
    cabinet_type_id="base-600-1door",
    door_style_id="shaker",
    color_id="navy",
    finish_id="matt",
)


class TestPriceCabinetCommand:
    """Tests for PriceCabinetCommand."""

    def test_price_with_weight(self, snapshot: RateSnapshot) -> None:
        output = PriceCabinetCommand().execute(SHAKER_NAVY, snapshot)

        assert output.breakdown.total == 1237.0
        assert output.weight is not None
        assert output.weight.carcass_weight_kg == pytest.approx(1.55424 * 12)
        assert output.weight.door_weight_kg == pytest.approx(0.428049 * 15 * 1.2)
        assert output.weight.hardware_weight_kg == pytest.approx(2.5)
        assert output.warnings == []

    def test_without_weight(self, snapshot: RateSnapshot) -> None:
        output = PriceCabinetCommand().execute(SHAKER_NAVY, snapshot, include_weight=False)
        assert output.weight is None

    def test_service_fees_opt_in(self, snapshot: RateSnapshot) -> None:
        output = PriceCabinetCommand().execute(SHAKER_NAVY, snapshot, include_service_fees=True)
        assert output.breakdown.total == 1732.0

    def test_invalid_input_raises(self, snapshot: RateSnapshot) -> None:
        with pytest.raises(PricingValidationError) as exc_info:
            PriceCabinetCommand().execute(
                CabinetConfiguration(cabinet_type_id="base-600-1door", height_mm=5000), snapshot
            )
        assert exc_info.value.issues[0].field == "height_mm"

    def test_unknown_type_raises(self, snapshot: RateSnapshot) -> None:
        with pytest.raises(CatalogLookupError):
            PriceCabinetCommand().execute(CabinetConfiguration(cabinet_type_id="x"), snapshot)

    def test_degraded_pricing_is_logged(
        self, snapshot: RateSnapshot, caplog: pytest.LogCaptureFixture
    ) -> None:
        output = PriceCabinetCommand().execute(
            CabinetConfiguration(cabinet_type_id="wall-600-2door"), snapshot
        )
        assert len(output.warnings) == 1
        assert "Degraded pricing" in caplog.text


class TestPriceOrderCommand:
    """Tests for PriceOrderCommand."""

    @pytest.fixture
    def lines(self) -> list[CabinetConfiguration]:
        return [
            CabinetConfiguration(
                cabinet_type_id="base-600-1door",
                door_style_id="shaker",
                color_id="navy",
                finish_id="matt",
                quantity=2,
            ),
            CabinetConfiguration(cabinet_type_id="dress-panel"),
        ]

    @pytest.fixture
    def zone(self) -> ZoneQuote:
        return ZoneQuote(
            delivery_price=150,
            assembly_price_per_cabinet=50,
            assembly_carcass_surcharge_pct=10,
            assembly_doors_surcharge_pct=10,
            lead_time_days=14,
            assembly_available=True,
        )

    def test_order_with_fulfilment_and_schedule(
        self,
        snapshot: RateSnapshot,
        lines: list[CabinetConfiguration],
        zone: ZoneQuote,
        fixed_now: datetime,
    ) -> None:
        output = PriceOrderCommand().execute(lines, snapshot, zone, assembly=True, now=fixed_now)

        assert output.breakdown.total == 2845.0
        assert output.fulfilment is not None
        assert output.fulfilment.assembly == pytest.approx(180.0)
        assert output.fulfilment.estimated_dispatch_date == fixed_now + timedelta(days=14)
        assert output.grand_total == pytest.approx(3175.0)
        assert output.schedule is not None
        assert output.schedule.total_amount == 3175.0
        assert output.schedule.deposit_amount == 635.0
        assert output.schedule.balance_amount == 2540.0
        assert len(output.weights) == 2
        assert output.total_weight_kg == pytest.approx(
            output.weights[0].total_weight_kg + output.weights[1].total_weight_kg
        )

    def test_order_without_zone(
        self, snapshot: RateSnapshot, lines: list[CabinetConfiguration]
    ) -> None:
        output = PriceOrderCommand().execute(lines, snapshot, deposit_percentage=50)
        assert output.fulfilment is None
        assert output.grand_total == 2845.0
        assert output.schedule.deposit_amount == 1422.5

    def test_every_line_is_validated_first(self, snapshot: RateSnapshot) -> None:
        with pytest.raises(PricingValidationError) as exc_info:
            PriceOrderCommand().execute(
                [
                    CabinetConfiguration(cabinet_type_id="base-600-1door", quantity=0),
                    CabinetConfiguration(cabinet_type_id="unknown"),
                ],
                snapshot,
            )
        assert [i.field for i in exc_info.value.issues] == [
            "items[0].quantity",
            "items[1].cabinet_type_id",
        ]

    def test_tier_gap_warning(self, snapshot: RateSnapshot) -> None:
        navy = replace(
            snapshot.color("navy"),
            service_fee_tier1_max=100,
            service_fee_tier1_amount=100,
            service_fee_tier2_max=None,
            service_fee_tier2_amount=None,
        )
        gap_snapshot = replace(snapshot, colors=(navy,))
        output = PriceOrderCommand().execute(
            [CabinetConfiguration(cabinet_type_id="base-600-1door", color_id="navy")],
            gap_snapshot,
        )
        assert output.breakdown.service_fee_total == 0
        assert any("above every service fee tier" in w for w in output.warnings)


class TestPaymentScheduleCommand:
    def test_execute_and_check(self, fixed_now: datetime) -> None:
        command = PaymentScheduleCommand()
        schedule = command.execute(3470, 20, now=fixed_now)

        assert command.check_payment(694, schedule, PaymentType.DEPOSIT).valid
        assert not command.check_payment(690, schedule, "deposit").valid

    def test_strict_check_raises(self, fixed_now: datetime) -> None:
        command = PaymentScheduleCommand()
        schedule = command.execute(3470, 20, now=fixed_now)
        with pytest.raises(ScheduleMismatchError):
            command.check_payment(690, schedule, "deposit", strict=True)


class TestPriceListCommand:
    def test_output_carries_type_and_columns(self, snapshot: RateSnapshot) -> None:
        output = PriceListCommand().execute(snapshot, "base-600-1door")
        assert output.cabinet_type.name == "Base 1 Door"
        assert output.column_labels == ["shaker / navy / matt", "shaker / navy / gloss"]
        assert len(output.rows) == 3

    def test_unknown_type(self, snapshot: RateSnapshot) -> None:
        with pytest.raises(CatalogLookupError):
            PriceListCommand().execute(snapshot, "missing")
