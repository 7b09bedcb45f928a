"""Validate command for checking rate catalog files.

This module provides the `validate` command that checks a JSON rate catalog
for schema errors, unparseable part formulas and pricing advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinet_pricing.application.config import (
    ConfigError,
    ValidationResult,
    load_catalog,
    validate_catalog,
)


def validate_command(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON rate catalog to validate"),
    ],
) -> None:
    """Validate a rate catalog file.

    Checks the catalog for:
    - JSON syntax errors
    - Schema validation errors (missing fields, bad references, etc.)
    - Part formulas that cannot be evaluated
    - Pricing advisories (missing rates, unreachable hardware, etc.)

    Exit codes:
        0 - Catalog is valid with no warnings
        1 - Catalog has errors (cannot be used)
        2 - Catalog is valid but has warnings

    Example:
        cabinet-pricing validate catalog.json
    """
    typer.echo(f"Validating {catalog_file}...")
    typer.echo()

    try:
        catalog = load_catalog(catalog_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_catalog(catalog)
    _display_validation_result(result)

    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a catalog or order loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Catalog is valid.")
