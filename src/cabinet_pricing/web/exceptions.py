"""Error handlers mapping domain exceptions to JSON responses.

Every error body has the same shape: ``error`` (message), ``error_type``
(machine-readable category) and ``details``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinet_pricing.application.config import ConfigError
from cabinet_pricing.domain.exceptions import (
    CatalogLookupError,
    PricingValidationError,
    ScheduleMismatchError,
)

logger = logging.getLogger(__name__)

# ConfigError types caused by the server's own catalog rather than the request
_SERVER_CONFIG_ERRORS = {
    "file_not_found",
    "permission_denied",
    "file_read_error",
    "not_configured",
}


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(PricingValidationError)
    async def pricing_validation_handler(
        request: Request, exc: PricingValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid pricing input",
                "error_type": "validation",
                "details": [
                    {"field": issue.field, "message": issue.message} for issue in exc.issues
                ],
            },
        )

    @app.exception_handler(ScheduleMismatchError)
    async def schedule_mismatch_handler(
        request: Request, exc: ScheduleMismatchError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "schedule_mismatch",
                "details": {
                    "payment_type": exc.payment_type,
                    "expected": exc.expected,
                    "actual": exc.actual,
                },
            },
        )

    @app.exception_handler(CatalogLookupError)
    async def catalog_lookup_handler(
        request: Request, exc: CatalogLookupError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"kind": exc.kind, "identifier": exc.identifier},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        server_side = exc.path is not None or exc.error_type in _SERVER_CONFIG_ERRORS
        if server_side:
            logger.error(f"Rate catalog unavailable: {exc.message}")
        return JSONResponse(
            status_code=500 if server_side else 400,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )
