"""Application services supporting the pricing commands."""

from cabinet_pricing.application.services.input_validator import InputValidatorService

__all__ = ["InputValidatorService"]
