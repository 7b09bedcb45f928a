"""Tests for price-list grid generation."""

from __future__ import annotations

import pytest

from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.domain.services import (
    DEFAULT_WIDTH_RANGES,
    CabinetConfiguration,
    CabinetPricingService,
    PriceListCombination,
    PriceListGenerator,
    WidthRange,
)
from cabinet_pricing.domain.services.price_list import default_combinations


class TestWidthRange:
    def test_rejects_inverted_range(self) -> None:
        with pytest.raises(ValueError):
            WidthRange("bad", 600, 500)

    def test_rejects_non_positive_minimum(self) -> None:
        with pytest.raises(ValueError):
            WidthRange("bad", 0, 500)


class TestDefaultCombinations:
    def test_one_column_per_active_finish(self, snapshot: RateSnapshot) -> None:
        combos = default_combinations(snapshot)
        assert [c.label for c in combos] == ["shaker / navy / matt", "shaker / navy / gloss"]

    def test_empty_snapshot(self) -> None:
        combos = default_combinations(RateSnapshot())
        assert [c.label for c in combos] == ["standard"]


class TestPriceListGenerator:
    """Tests for PriceListGenerator."""

    def test_default_ranges_and_columns(self, snapshot: RateSnapshot) -> None:
        rows = PriceListGenerator().generate(snapshot, "base-600-1door")

        assert [row.width_range for row in rows] == list(DEFAULT_WIDTH_RANGES)
        assert all(len(row.cells) == 2 for row in rows)
        totals = [row.cells[0].total for row in rows]
        assert totals == sorted(totals)

    def test_cells_priced_at_range_minimum(self, snapshot: RateSnapshot) -> None:
        combo = PriceListCombination(door_style_id="flat", color_id="white")
        rows = PriceListGenerator().generate(
            snapshot, "base-600-1door", [WidthRange("450-600", 450, 600)], [combo]
        )
        expected = CabinetPricingService().price(
            CabinetConfiguration(
                cabinet_type_id="base-600-1door",
                width_mm=450,
                door_style_id="flat",
                color_id="white",
            ),
            snapshot,
        )
        assert rows[0].cells[0].total == expected.total
        assert rows[0].cells[0].combination.label == "flat / white"

    def test_out_of_bounds_range_is_skipped(
        self, snapshot: RateSnapshot, caplog: pytest.LogCaptureFixture
    ) -> None:
        ranges = [WidthRange("100-200", 100, 200), WidthRange("600-700", 600, 700)]
        rows = PriceListGenerator().generate(snapshot, "base-600-1door", ranges)

        assert [row.width_range.label for row in rows] == ["600-700"]
        assert "Skipping width range 100-200" in caplog.text
