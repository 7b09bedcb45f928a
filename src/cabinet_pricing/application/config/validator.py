"""Validation structures and catalog advisory checks.

Loading a catalog only proves it is well formed. The advisories here look
for entries that load fine but would price with fallbacks: formulas that
do not evaluate, door parts on a type with no door count, hardware
requirements no set or option can satisfy, and colours whose fee tiers
leave a gap below the minimum order amount.
"""

from dataclasses import dataclass, field
from typing import Any

from cabinet_pricing.application.config.schemas import RateCatalog
from cabinet_pricing.domain.exceptions import FormulaError
from cabinet_pricing.domain.services.formula import FormulaEvaluator


@dataclass
class ValidationError:
    """A blocking catalog problem.

    Attributes:
        path: JSON path to the invalid field (e.g., "cabinet_types[0].parts[1]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking catalog concern.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the catalog has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_formulas(catalog: RateCatalog) -> ValidationResult:
    """Every part formula must evaluate; a failing one prices the part at 0."""
    result = ValidationResult()
    evaluator = FormulaEvaluator()
    for t_index, cabinet_type in enumerate(catalog.cabinet_types):
        for p_index, part in enumerate(cabinet_type.parts):
            for attr in ("width_formula", "height_formula"):
                formula = getattr(part, attr)
                path = f"cabinet_types[{t_index}].parts[{p_index}].{attr}"
                if formula is None or not formula.strip():
                    if not part.is_hardware:
                        result.add_warning(
                            path,
                            f"Part '{part.part_name}' has no {attr.split('_')[0]} formula",
                            "Parts without a formula contribute no area",
                        )
                    continue
                try:
                    evaluator.check(formula)
                except FormulaError as e:
                    result.add_error(path, e.reason, formula)
    return result


def check_cabinet_advisories(catalog: RateCatalog) -> ValidationResult:
    """Check cabinet types for door/drawer counts and hardware coverage."""
    result = ValidationResult()
    set_categories = {s.category for s in catalog.hardware_sets}
    option_requirements = {o.requirement_id for o in catalog.hardware_options if o.active}

    for index, cabinet_type in enumerate(catalog.cabinet_types):
        path = f"cabinet_types[{index}]"
        has_door_parts = any(part.is_door for part in cabinet_type.parts)
        if has_door_parts and cabinet_type.door_count == 0:
            result.add_warning(
                f"{path}.door_count",
                f"'{cabinet_type.name}' has door parts but door_count is 0",
                "Per-door hardware will not be charged",
            )
        for r_index, req in enumerate(cabinet_type.hardware_requirements):
            if not req.active:
                continue
            if req.category not in set_categories and req.id not in option_requirements:
                result.add_warning(
                    f"{path}.hardware_requirements[{r_index}]",
                    f"No hardware set or option covers '{req.category}'",
                    "The requirement will be priced at 0",
                )
            if req.unit_scope.value == "per_drawer" and cabinet_type.drawer_count == 0:
                result.add_warning(
                    f"{path}.hardware_requirements[{r_index}]",
                    f"'{cabinet_type.name}' has a per-drawer requirement but no drawers",
                )
    return result


def check_pricing_advisories(catalog: RateCatalog) -> ValidationResult:
    """Check for fallback pricing and service fee tier gaps."""
    result = ValidationResult()
    if not any(m.active for m in catalog.materials):
        settings = catalog.settings
        keys = (
            settings.keys()
            if isinstance(settings, dict)
            else {row.setting_key for row in settings}
        )
        if "hmr_rate_per_sqm" not in keys:
            result.add_warning(
                "materials",
                "No active material and no hmr_rate_per_sqm setting",
                "Carcass pricing will use the built-in fallback rate",
            )

    for index, color in enumerate(catalog.colors):
        if color.minimum_order_amount <= 0:
            continue
        highest = max(
            (m for m in (color.service_fee_tier1_max, color.service_fee_tier2_max) if m is not None),
            default=None,
        )
        if highest is None or highest < color.minimum_order_amount:
            result.add_warning(
                f"colors[{index}]",
                f"Colour '{color.name}' totals between "
                f"{highest or 0:g} and {color.minimum_order_amount:g} incur no service fee",
            )
    return result


def validate_catalog(catalog: RateCatalog) -> ValidationResult:
    """Run every catalog check.

    Args:
        catalog: A validated RateCatalog.

    Returns:
        ValidationResult with all errors and warnings found.
    """
    result = ValidationResult()
    result.merge(check_formulas(catalog))
    result.merge(check_cabinet_advisories(catalog))
    result.merge(check_pricing_advisories(catalog))
    return result
