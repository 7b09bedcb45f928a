"""Rate catalog endpoints."""

from fastapi import APIRouter

from cabinet_pricing.application.config import (
    ConfigError,
    load_catalog_from_dict,
    validate_catalog,
)
from cabinet_pricing.web.dependencies import SnapshotDep
from cabinet_pricing.web.schemas.requests import CatalogValidateRequest
from cabinet_pricing.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("")
async def catalog_summary(snapshot: SnapshotDep) -> dict:
    """Version and contents of the rate catalog currently served."""
    return {
        "rate_version": snapshot.version,
        "cabinet_types": [
            {"id": ct.id, "name": ct.name, "category": ct.category.value}
            for ct in snapshot.cabinet_types
            if ct.active
        ],
        "door_styles": [s.id for s in snapshot.door_styles if s.active],
        "colors": [c.id for c in snapshot.colors if c.active],
        "finishes": [f.id for f in snapshot.finishes if f.active],
    }


@router.post("/validate", response_model=ValidationResultSchema)
async def validate_catalog_body(request: CatalogValidateRequest) -> ValidationResultSchema:
    """Validate a rate catalog without serving it.

    Schema errors are reported in the result rather than as an error
    response, so every problem in the catalog is listed at once.
    """
    try:
        catalog = load_catalog_from_dict(request.catalog)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": d.get("path", ""), "message": d.get("message", e.message)}
                for d in e.details
            ]
            or [{"path": "", "message": e.message}],
        )

    result = validate_catalog(catalog)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
