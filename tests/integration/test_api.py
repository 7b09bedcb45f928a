"""Integration tests for the REST API.

The app is served against an in-memory snapshot of the sample catalog by
overriding the service factory dependency.
"""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from cabinet_pricing.application.factory import ServiceFactory
from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.infrastructure.catalog import InMemoryRateRepository
from cabinet_pricing.web.app import create_app
from cabinet_pricing.web.dependencies import get_service_factory

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "catalogs"

pytestmark = pytest.mark.integration

SHAKER_NAVY = {
    "cabinet_type_id": "base-600-1door",
    "door_style_id": "shaker",
    "color_id": "navy",
    "finish_id": "matt",
}


@pytest.fixture
def client(snapshot: RateSnapshot) -> Iterator[TestClient]:
    """Test client serving the sample catalog."""
    factory = ServiceFactory()
    factory.set_rate_repository(InMemoryRateRepository(snapshot))

    app = create_app()
    app.dependency_overrides[get_service_factory] = lambda: factory
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def order_body() -> dict:
    return json.loads((FIXTURES_PATH / "order.json").read_text())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestPriceEndpoint:
    """Tests for POST /api/v1/price."""

    def test_price_cabinet(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json=SHAKER_NAVY)

        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["total"] == 1237.0
        assert data["breakdown"]["carcass"] == pytest.approx(155.424)
        assert data["breakdown"]["doors"] == pytest.approx(941.7078, rel=1e-6)
        assert data["breakdown"]["rate_version"] == "2026-10-01"
        assert data["weight"]["unit_weight_kg"] == pytest.approx(28.855762, rel=1e-6)
        assert data["warnings"] == []

    def test_without_weight(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json={**SHAKER_NAVY, "include_weight": False})

        assert response.status_code == 200
        assert response.json()["weight"] is None

    def test_service_fees(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price", json={**SHAKER_NAVY, "include_service_fees": True}
        )

        assert response.status_code == 200
        breakdown = response.json()["breakdown"]
        assert breakdown["service_fee_total"] == 450.0
        assert breakdown["service_fees"][0]["tier"] == "tier1"
        assert breakdown["total"] == 1732.0

    def test_hardware_selection(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price", json={**SHAKER_NAVY, "hardware": {"hinge": "hettich"}}
        )

        assert response.status_code == 200
        assert response.json()["breakdown"]["hardware"] == pytest.approx(21.6)

    def test_degraded_pricing_is_reported(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json={"cabinet_type_id": "wall-600-2door"})

        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["hardware"] == pytest.approx(54.0)
        assert any("shelf_pin" in warning for warning in data["warnings"])

    def test_out_of_range_dimensions(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price",
            json={"cabinet_type_id": "base-600-1door", "width_mm": 50, "quantity": 0},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        fields = {detail["field"] for detail in data["details"]}
        assert fields == {"width_mm", "quantity"}

    @pytest.mark.parametrize("width", [float("nan"), float("inf")])
    def test_non_finite_dimension_rejected(self, client: TestClient, width: float) -> None:
        # stdlib json writes bare NaN and Infinity literals into the body
        body = json.dumps({**SHAKER_NAVY, "width_mm": width})
        response = client.post(
            "/api/v1/price", content=body, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 422

    def test_unknown_cabinet_type(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json={"cabinet_type_id": "no-such-type"})

        assert response.status_code == 404
        data = response.json()
        assert data["error_type"] == "not_found"
        assert data["details"]["identifier"] == "no-such-type"

    def test_malformed_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json={"width_mm": 600})
        assert response.status_code == 422

    def test_unknown_field_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/price", json={**SHAKER_NAVY, "colour": "navy"})
        assert response.status_code == 422


class TestOrderEndpoint:
    """Tests for POST /api/v1/order."""

    def test_price_order(self, client: TestClient, order_body: dict) -> None:
        response = client.post("/api/v1/order", json=order_body)

        assert response.status_code == 200
        data = response.json()
        assert data["breakdown"]["total"] == 2845.0
        assert data["breakdown"]["service_fees"][0]["tier"] == "tier2"
        assert data["fulfilment"]["delivery"] == 150.0
        assert data["fulfilment"]["assembly"] == pytest.approx(180.0)
        assert data["grand_total"] == pytest.approx(3175.0)
        assert data["schedule"]["deposit_amount"] == 635.0
        assert data["schedule"]["balance_amount"] == 2540.0

    def test_order_without_zone(self, client: TestClient) -> None:
        response = client.post("/api/v1/order", json={"items": [SHAKER_NAVY]})

        assert response.status_code == 200
        data = response.json()
        assert data["fulfilment"] is None
        assert data["grand_total"] == data["breakdown"]["total"]

    def test_invalid_lines(self, client: TestClient) -> None:
        body = json.loads((FIXTURES_PATH / "order_invalid.json").read_text())
        response = client.post("/api/v1/order", json=body)

        assert response.status_code == 422
        fields = {detail["field"] for detail in response.json()["details"]}
        assert "items[0].width_mm" in fields
        assert "items[1].cabinet_type_id" in fields

    def test_empty_order(self, client: TestClient) -> None:
        response = client.post("/api/v1/order", json={"items": []})
        assert response.status_code == 422


class TestWeightEndpoint:
    def test_weight(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/weight",
            json={"cabinet_type_id": "base-600-1door", "door_style_id": "shaker", "quantity": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["quantity"] == 2
        assert data["unit_weight_kg"] == pytest.approx(28.855762, rel=1e-6)
        assert data["package_dimensions"]["length_mm"] == 650

    def test_weight_invalid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/weight", json={"cabinet_type_id": "base-600-1door", "height_mm": 5000}
        )
        assert response.status_code == 422


class TestPriceListEndpoint:
    def test_default_grid(self, client: TestClient) -> None:
        response = client.post("/api/v1/price-list", json={"cabinet_type_id": "base-600-1door"})

        assert response.status_code == 200
        data = response.json()
        assert data["columns"] == ["shaker / navy / matt", "shaker / navy / gloss"]
        assert len(data["rows"]) == 3
        for row in data["rows"]:
            matt, gloss = row["prices"]
            assert gloss > matt

    def test_explicit_ranges_and_combinations(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list",
            json={
                "cabinet_type_id": "base-600-1door",
                "width_ranges": [{"min_width_mm": 600, "max_width_mm": 700}],
                "combinations": [
                    {"door_style_id": "shaker", "color_id": "navy", "finish_id": "matt"}
                ],
            },
        )

        assert response.status_code == 200
        row = response.json()["rows"][0]
        assert row["label"] == "600-700mm"
        assert row["prices"] == [1237.0]

    def test_inverted_range_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/price-list",
            json={
                "cabinet_type_id": "base-600-1door",
                "width_ranges": [{"min_width_mm": 700, "max_width_mm": 600}],
            },
        )
        assert response.status_code == 422


class TestScheduleEndpoints:
    """Tests for the payment schedule endpoints."""

    def test_create_schedule(self, client: TestClient) -> None:
        response = client.post("/api/v1/schedule", json={"total_amount": 3470})

        assert response.status_code == 200
        data = response.json()
        assert data["deposit_amount"] == 694.0
        assert data["balance_amount"] == 2776.0
        assert data["deposit_amount"] + data["balance_amount"] == data["total_amount"]

    def test_bad_percentage(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedule", json={"total_amount": 3470, "deposit_percentage": 150}
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "deposit_percentage"

    def test_negative_total_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/schedule", json={"total_amount": -1})
        assert response.status_code == 422

    def test_validate_non_finite_amount_rejected(self, client: TestClient) -> None:
        body = '{"schedule": {"total_amount": 3470}, "amount": Infinity}'
        response = client.post(
            "/api/v1/schedule/validate",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    def test_validate_matching_payment(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedule/validate",
            json={"schedule": {"total_amount": 3470}, "amount": 694},
        )

        assert response.status_code == 200
        assert response.json()["valid"] is True

    def test_validate_mismatched_payment(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/schedule/validate",
            json={
                "schedule": {"total_amount": 3470},
                "amount": 2775,
                "payment_type": "balance",
            },
        )

        assert response.status_code == 409
        data = response.json()
        assert data["error_type"] == "schedule_mismatch"
        assert data["details"]["expected"] == 2776.0
        assert data["details"]["actual"] == 2775.0


class TestCatalogEndpoints:
    """Tests for the catalog endpoints."""

    def test_catalog_summary(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog")

        assert response.status_code == 200
        data = response.json()
        assert data["rate_version"] == "2026-10-01"
        assert "base-600-1door" in [ct["id"] for ct in data["cabinet_types"]]
        assert data["finishes"] == ["matt", "gloss"]

    def test_validate_clean_catalog(self, client: TestClient) -> None:
        catalog = json.loads((FIXTURES_PATH / "catalog.json").read_text())
        response = client.post("/api/v1/catalog/validate", json={"catalog": catalog})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["errors"] == []
        assert data["warnings"] == []

    def test_validate_catalog_with_warnings(self, client: TestClient) -> None:
        catalog = json.loads((FIXTURES_PATH / "catalog_with_warnings.json").read_text())
        response = client.post("/api/v1/catalog/validate", json={"catalog": catalog})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"]

    def test_validate_schema_errors_in_body(self, client: TestClient) -> None:
        catalog = json.loads((FIXTURES_PATH / "unknown_field.json").read_text())
        response = client.post("/api/v1/catalog/validate", json={"catalog": catalog})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"]


class TestCatalogUnavailable:
    def test_unconfigured_catalog_is_server_error(self) -> None:
        app = create_app()
        app.dependency_overrides[get_service_factory] = lambda: ServiceFactory()
        with TestClient(app) as test_client:
            response = test_client.post("/api/v1/price", json=SHAKER_NAVY)

        assert response.status_code == 500
        assert response.json()["error_type"] == "not_configured"
