"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.

Example:
    ```python
    from cabinet_pricing.contracts import RateRepositoryProtocol

    def current_version(repository: RateRepositoryProtocol) -> str | None:
        return repository.load().version
    ```
"""

# Service protocols
from .protocols import (
    InputValidatorProtocol as InputValidatorProtocol,
    PricingServiceProtocol as PricingServiceProtocol,
    RateRepositoryProtocol as RateRepositoryProtocol,
    WeightCalculatorProtocol as WeightCalculatorProtocol,
)

__all__ = [
    "InputValidatorProtocol",
    "PricingServiceProtocol",
    "RateRepositoryProtocol",
    "WeightCalculatorProtocol",
]
