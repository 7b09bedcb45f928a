"""Adapters converting validated configuration models to domain objects.

The Pydantic models stay at the edge; the pricing engine only ever sees
the frozen domain dataclasses produced here.
"""

from cabinet_pricing.application.config.schemas import (
    CabinetPartConfig,
    CabinetRequestConfig,
    CabinetTypeConfig,
    RateCatalog,
    ZoneQuoteConfig,
)
from cabinet_pricing.domain.entities import (
    CabinetPart,
    CabinetType,
    Color,
    DoorStyle,
    Finish,
    HardwareBrandSet,
    HardwareOption,
    HardwareProduct,
    HardwareRequirement,
    HardwareSetItem,
    MaterialSpecification,
)
from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.domain.services import (
    CabinetConfiguration,
    PricingSettings,
    ZoneQuote,
)


def _part_to_domain(config: CabinetPartConfig) -> CabinetPart:
    return CabinetPart(**config.model_dump())


def _cabinet_type_to_domain(config: CabinetTypeConfig) -> CabinetType:
    data = config.model_dump(exclude={"parts", "hardware_requirements"})
    return CabinetType(
        **data,
        parts=tuple(_part_to_domain(part) for part in config.parts),
        hardware_requirements=tuple(
            HardwareRequirement(**req.model_dump()) for req in config.hardware_requirements
        ),
    )


def catalog_to_settings(catalog: RateCatalog) -> PricingSettings:
    """Build the settings snapshot from the catalog's settings section."""
    if isinstance(catalog.settings, dict):
        return PricingSettings.from_rows(catalog.settings)
    return PricingSettings.from_rows([row.model_dump() for row in catalog.settings])


def catalog_to_snapshot(catalog: RateCatalog) -> RateSnapshot:
    """Convert a validated catalog into an immutable rate snapshot.

    Args:
        catalog: A validated RateCatalog.

    Returns:
        RateSnapshot holding frozen domain entities.
    """
    products = {
        product.id: HardwareProduct(**product.model_dump())
        for product in catalog.hardware_products
    }
    options = tuple(
        HardwareOption(
            requirement_id=option.requirement_id,
            brand_id=option.brand_id,
            product=products[option.product_id],
            active=option.active,
        )
        for option in catalog.hardware_options
    )
    sets = tuple(
        HardwareBrandSet(
            id=hardware_set.id,
            brand_name=hardware_set.brand_name,
            category=hardware_set.category,
            set_name=hardware_set.set_name,
            items=tuple(
                HardwareSetItem(product=products[item.product_id], quantity=item.quantity)
                for item in hardware_set.items
            ),
            is_default=hardware_set.is_default,
            brand_id=hardware_set.brand_id,
        )
        for hardware_set in catalog.hardware_sets
    )

    return RateSnapshot(
        settings=catalog_to_settings(catalog),
        cabinet_types=tuple(_cabinet_type_to_domain(ct) for ct in catalog.cabinet_types),
        materials=tuple(MaterialSpecification(**m.model_dump()) for m in catalog.materials),
        door_styles=tuple(DoorStyle(**s.model_dump()) for s in catalog.door_styles),
        colors=tuple(Color(**c.model_dump()) for c in catalog.colors),
        finishes=tuple(Finish(**f.model_dump()) for f in catalog.finishes),
        hardware_options=options,
        hardware_sets=sets,
        version=catalog.rate_version,
    )


def request_to_configuration(request: CabinetRequestConfig) -> CabinetConfiguration:
    """Convert a cabinet request into a domain configuration."""
    return CabinetConfiguration(
        cabinet_type_id=request.cabinet_type_id,
        width_mm=request.width_mm,
        height_mm=request.height_mm,
        depth_mm=request.depth_mm,
        quantity=request.quantity,
        door_style_id=request.door_style_id,
        color_id=request.color_id,
        finish_id=request.finish_id,
        material_type=request.material_type,
        hardware_selections=request.hardware,
    )


def zone_to_domain(config: ZoneQuoteConfig) -> ZoneQuote:
    """Convert a zone quote model into the domain value."""
    return ZoneQuote(**config.model_dump())
