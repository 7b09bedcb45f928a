"""Cabinet, order and price-list pricing endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application.config import request_to_configuration, zone_to_domain
from cabinet_pricing.domain.exceptions import PricingValidationError
from cabinet_pricing.domain.services import PriceListCombination, WidthRange
from cabinet_pricing.domain.value_objects import Dimensions
from cabinet_pricing.infrastructure.exporters import (
    order_to_dict,
    price_list_to_dict,
    price_output_to_dict,
    weight_to_dict,
)
from cabinet_pricing.web.dependencies import (
    OrderCommandDep,
    PriceCommandDep,
    PriceListCommandDep,
    ServiceFactoryDep,
    SnapshotDep,
)
from cabinet_pricing.web.schemas.requests import (
    OrderRequest,
    PriceListRequest,
    PriceRequest,
    WeightRequest,
)
from cabinet_pricing.web.schemas.responses import (
    OrderResponse,
    PriceListResponse,
    PriceResponse,
    WeightSchema,
)

router = APIRouter(tags=["pricing"])


@router.post("/price", response_model=PriceResponse)
async def price_cabinet(
    request: PriceRequest,
    snapshot: SnapshotDep,
    command: PriceCommandDep,
) -> PriceResponse:
    """Price one cabinet configuration.

    Returns:
        Breakdown with unrounded components, rounded total and any
        degraded-pricing warnings.

    Raises:
        PricingValidationError: Dimensions or quantity out of range (422).
        CatalogLookupError: Unknown cabinet type (404).
    """
    result = command.execute(
        request_to_configuration(request),
        snapshot,
        include_weight=request.include_weight,
        include_service_fees=request.include_service_fees,
    )
    return PriceResponse.model_validate(price_output_to_dict(result))


@router.post("/order", response_model=OrderResponse)
async def price_order(
    request: OrderRequest,
    snapshot: SnapshotDep,
    command: OrderCommandDep,
) -> OrderResponse:
    """Price a whole order with service fees, fulfilment and payment schedule."""
    result = command.execute(
        [request_to_configuration(item) for item in request.items],
        snapshot,
        zone=zone_to_domain(request.zone) if request.zone else None,
        assembly=request.assembly,
        deposit_percentage=request.deposit_percentage,
    )
    return OrderResponse.model_validate(order_to_dict(result))


@router.post("/weight", response_model=WeightSchema)
async def estimate_weight(
    request: WeightRequest,
    snapshot: SnapshotDep,
    factory: ServiceFactoryDep,
) -> WeightSchema:
    """Estimate weight and shipping carton of a cabinet line."""
    configuration = request_to_configuration(request)
    issues = factory.get_input_validator().validate_configuration(configuration, snapshot)
    if issues:
        raise PricingValidationError(issues)

    cabinet_type = snapshot.cabinet_type(configuration.cabinet_type_id)
    width, height, depth = configuration.resolved_size(cabinet_type)
    weight = factory.get_weight_calculator().calculate(
        cabinet_type,
        Dimensions(width_mm=width, height_mm=height, depth_mm=depth),
        configuration.quantity,
        door_style=snapshot.door_style(configuration.door_style_id),
        material=snapshot.material(configuration.material_type)
        or snapshot.default_material(),
    )
    return WeightSchema.model_validate(weight_to_dict(weight))


@router.post("/price-list", response_model=PriceListResponse)
async def price_list(
    request: PriceListRequest,
    snapshot: SnapshotDep,
    command: PriceListCommandDep,
) -> PriceListResponse:
    """Price a cabinet type across width ranges and finish combinations."""
    width_ranges = None
    if request.width_ranges:
        width_ranges = [
            WidthRange(
                r.label or f"{r.min_width_mm:g}-{r.max_width_mm:g}mm",
                r.min_width_mm,
                r.max_width_mm,
            )
            for r in request.width_ranges
        ]
    combinations = None
    if request.combinations:
        combinations = [PriceListCombination(**c.model_dump()) for c in request.combinations]

    result = command.execute(snapshot, request.cabinet_type_id, width_ranges, combinations)
    return PriceListResponse.model_validate(price_list_to_dict(result))
